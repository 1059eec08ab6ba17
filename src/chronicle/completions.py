"""Shell completion helpers for chronicle CLI."""

from .config import load_config
from .core import find_chronicle_dir
from .errors import ChronicleError
from .models import VersionStatus
from .services import FileStore


def complete_status(incomplete: str) -> list[str]:
    """Return VersionStatus values that start with the given prefix.

    Args:
        incomplete: The partial string typed by the user

    Returns:
        List of matching status values (lowercase strings)
    """
    return [s.value for s in VersionStatus if s.value.startswith(incomplete.lower())]


def complete_tag_name(incomplete: str) -> list[str]:
    """Return tag names of the default content id matching the given prefix.

    Reads the workspace found from the current directory. Returns an empty
    list when there is no workspace or the document cannot be read, since
    completion must never fail.

    Args:
        incomplete: The partial tag name typed by the user

    Returns:
        Sorted list of matching tag names
    """
    chronicle_dir = find_chronicle_dir()
    if chronicle_dir is None:
        return []
    try:
        config = load_config(chronicle_dir)
        state = FileStore(config.store_root(chronicle_dir)).load(config.content.default_id)
    except ChronicleError:
        return []
    if state is None:
        return []
    return sorted(name for name in state.tags if name.startswith(incomplete))
