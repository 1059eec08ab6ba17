"""CLI command implementations for chronicle.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .diff import compare, diff
from .init import init
from .publish import history, publish, unpublish
from .status import status
from .tags import tag_add, tag_delete, tag_list, tag_rename
from .versions import (
    revert,
    version_create,
    version_current,
    version_delete,
    version_list,
    version_show,
)

__all__ = [
    "compare",
    "diff",
    "history",
    "init",
    "publish",
    "revert",
    "status",
    "tag_add",
    "tag_delete",
    "tag_list",
    "tag_rename",
    "unpublish",
    "version_create",
    "version_current",
    "version_delete",
    "version_list",
    "version_show",
]
