# src/taskz/cli/main.py

"""
CLI entrypoint.

Resolves settings, initializes logging, builds AppState, then runs exactly
one command and exits with its status.
"""

from __future__ import annotations

import logging
import sys

from rich.console import Console

from ..cli.bootstrap import create_initial_state
from ..cli.commands import EXIT_FAILURE, fail, registry
from ..config import Settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    console: Console | None = None,
    err_console: Console | None = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = Settings.from_env()
    if console is None:
        console = Console(highlight=False, emoji=False)
    if err_console is None:
        err_console = Console(stderr=True, highlight=False, emoji=False)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(
            log_file=settings.log_path if settings.log_to_file else None,
            console_level=console_level,
        )
    except OSError:
        # Logging to a file is optional; keep going with stderr only.
        setup_logging(log_file=None, console_level=console_level)
        logger.warning("Cannot open log file %s; file logging disabled.", settings.log_path)

    logger.debug("Starting %s argv=%r", settings.app_name, argv)

    try:
        state = create_initial_state(settings)
    except OSError as e:
        logger.debug("Bootstrap failed.", exc_info=True)
        err_console.print(fail(f"cannot prepare data directory {settings.data_dir}: {e}"), soft_wrap=True)
        return EXIT_FAILURE

    try:
        reply = registry.handle(state, argv)
    except Exception:
        logger.exception("Command handler crashed.")
        err_console.print(fail("internal error while handling a command"), soft_wrap=True)
        return EXIT_FAILURE

    (console if reply.ok else err_console).print(reply.text, soft_wrap=True)
    return reply.exit_code


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
