# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from taskz.config import Settings, default_data_dir, default_install_path


def test_default_data_dir_posix(monkeypatch) -> None:
    monkeypatch.setenv("HOME", "/home/alice")
    assert default_data_dir(windows=False) == Path("/home/alice/.local/share/taskz")

    monkeypatch.delenv("HOME")
    assert default_data_dir(windows=False) == Path(".local/share/taskz")


def test_default_data_dir_windows(monkeypatch) -> None:
    monkeypatch.setenv("LOCALAPPDATA", "D:\\AppData")
    assert default_data_dir(windows=True) == Path("D:\\AppData") / "taskz"

    monkeypatch.delenv("LOCALAPPDATA")
    assert default_data_dir(windows=True) == Path("C:\\temp") / "taskz"


def test_default_install_path() -> None:
    assert default_install_path(windows=False) == Path("/usr/local/bin/taskz")
    assert default_install_path(windows=True) == Path("C:\\Windows\\System32\\taskz.exe")


def test_settings_from_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKZ_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKZ_UNDO_PATH", str(tmp_path / "elsewhere" / "u.json"))
    monkeypatch.setenv("TASKZ_LOG_TO_FILE", "no")
    monkeypatch.setenv("TASKZ_LOG_LEVEL", "debug")

    s = Settings.from_env(load_env_file=False)

    assert s.data_dir == tmp_path
    assert s.tasks_path == tmp_path / "tasks.json"
    assert s.undo_path == tmp_path / "elsewhere" / "u.json"
    assert s.log_path == tmp_path / "taskz.log"
    assert s.log_to_file is False
    assert s.log_level == "debug"


def test_settings_app_name(monkeypatch) -> None:
    monkeypatch.delenv("TASKZ_APP_NAME", raising=False)
    assert Settings.from_env(load_env_file=False).app_name == "taskz"

    monkeypatch.setenv("TASKZ_APP_NAME", "todo")
    assert Settings.from_env(load_env_file=False).app_name == "todo"
