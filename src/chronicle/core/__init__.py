"""Core business logic for chronicle.

This package contains the pure version-history logic, operating on an
in-memory ContentState with no storage I/O:
- diff_engine: Unified patches and line-count change statistics
- ledger: Version creation, lookup, deletion and revert
- tags: Unique tag names pointing at versions
- publishing: Exclusive publishing and the publish audit trail
- comparison: Diffs and reports between stored versions
- identifiers: Validation of caller-supplied ids and names

Plus the workspace helpers used by the file store and CLI:
- lock_manager: PID lock files per content id
- chronicle_dir: Locating the .chronicle directory
"""

from .chronicle_dir import find_chronicle_dir, get_chronicle_dir
from .comparison import compare, compare_previous, formatted_diff
from .diff_engine import compute_changes, compute_diff, create_patch
from .identifiers import (
    coerce_version_id,
    validate_content,
    validate_content_id,
    validate_tag_name,
    validate_text,
)
from .ledger import (
    create_version,
    delete_version,
    find_version,
    get_current,
    get_version,
    list_version_summaries,
    list_versions,
    next_version_id,
    revert,
)
from .lock_manager import LockError, acquire_lock, release_lock
from .publishing import get_publish_history, get_published, publish, unpublish
from .tags import create_tag, delete_tag, list_tags, list_tags_for_version, rename_tag

__all__ = [
    "LockError",
    "acquire_lock",
    "coerce_version_id",
    "compare",
    "compare_previous",
    "compute_changes",
    "compute_diff",
    "create_patch",
    "create_tag",
    "create_version",
    "delete_tag",
    "delete_version",
    "find_chronicle_dir",
    "find_version",
    "formatted_diff",
    "get_chronicle_dir",
    "get_current",
    "get_publish_history",
    "get_published",
    "get_version",
    "list_tags",
    "list_tags_for_version",
    "list_version_summaries",
    "list_versions",
    "next_version_id",
    "publish",
    "release_lock",
    "rename_tag",
    "revert",
    "unpublish",
    "validate_content",
    "validate_content_id",
    "validate_tag_name",
    "validate_text",
]
