"""Chronicle workspace directory utilities."""

import os
from pathlib import Path

from ..constants import CHRONICLE_DIR_ENV, CHRONICLE_DIR_NAME


def find_chronicle_dir(start: Path | None = None) -> Path | None:
    """Find an existing .chronicle directory.

    The CHRONICLE_DIR environment variable wins; otherwise the directory
    tree is walked upward from start.

    Args:
        start: Directory to start from, defaults to the working directory

    Returns:
        Path to the .chronicle directory, or None if there is none
    """
    override = os.environ.get(CHRONICLE_DIR_ENV)
    if override:
        path = Path(override)
        return path if path.is_dir() else None

    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / CHRONICLE_DIR_NAME
        if candidate.is_dir():
            return candidate
    return None


def get_chronicle_dir(start: Path | None = None) -> Path:
    """Get the .chronicle directory path, existing or to be created.

    Args:
        start: Directory to start from, defaults to the working directory

    Returns:
        The found .chronicle directory, or start/.chronicle
    """
    found = find_chronicle_dir(start)
    if found is not None:
        return found
    override = os.environ.get(CHRONICLE_DIR_ENV)
    if override:
        return Path(override)
    return (start or Path.cwd()) / CHRONICLE_DIR_NAME
