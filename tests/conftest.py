# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from taskz.cli.bootstrap import create_initial_state
from taskz.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than Settings.from_env(),
    to keep unit tests isolated from the real environment and ~/.local.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskz",
        log_level="WARNING",
        log_to_file=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        undo_path=data_dir / "undo.json",
        log_path=data_dir / "taskz.log",
        install_path=tmp_path / "bin" / "taskz",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings)


class CapturedConsoles:
    """Plain-text stdout/stderr consoles for asserting on CLI output."""

    def __init__(self) -> None:
        self._out = io.StringIO()
        self._err = io.StringIO()
        self.console = Console(file=self._out, color_system=None, width=200, highlight=False, emoji=False)
        self.err_console = Console(file=self._err, color_system=None, width=200, highlight=False, emoji=False)

    @property
    def out(self) -> str:
        return self._out.getvalue()

    @property
    def err(self) -> str:
        return self._err.getvalue()


@pytest.fixture()
def run_cli(settings: SimpleNamespace):
    """Run taskz.cli.main.main() against tmp settings; returns (exit_code, consoles)."""
    from taskz.cli.main import main

    def _run(*argv: str) -> tuple[int, CapturedConsoles]:
        cap = CapturedConsoles()
        code = main(list(argv), settings=settings, console=cap.console, err_console=cap.err_console)
        return code, cap

    return _run
