# src/taskz/cli/installer.py

"""
Self-install / uninstall.

`taskz -i` copies the launcher that is currently running into a system
binary directory; `taskz -u` removes it again. Both usually need admin rights.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


PACKAGE_DIR = Path(__file__).resolve().parent.parent


def _is_package_module(path: Path) -> bool:
    """True for a .py file inside taskz itself (e.g. __main__.py under `python -m taskz`)."""
    return path.suffix == ".py" and path.resolve().is_relative_to(PACKAGE_DIR)


def current_launcher() -> Path:
    """
    Path of the script/executable this process was started from.

    Under `python -m taskz` argv[0] is the package's __main__.py, which cannot
    run on its own; the installed `taskz` console script is used instead.
    """
    argv0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if argv0 is not None and argv0.is_file() and not _is_package_module(argv0):
        return argv0.resolve()
    found = shutil.which("taskz")
    if found:
        return Path(found).resolve()
    raise FileNotFoundError("cannot locate the running taskz executable")


def install(target: Path, *, source: Path | None = None) -> Path:
    """Copy the launcher to `target` (permission bits kept). Raises OSError."""
    src = source if source is not None else current_launcher()
    logger.debug("Installing %s -> %s", src, target)
    shutil.copy2(src, target)
    logger.info("Installed to %s", target)
    return target


def uninstall(target: Path) -> bool:
    """Delete an installed copy. False when nothing is installed."""
    if not target.exists():
        return False
    target.unlink()
    logger.info("Uninstalled from %s", target)
    return True
