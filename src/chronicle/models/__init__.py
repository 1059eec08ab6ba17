"""Pydantic data models for chronicle content documents.

This package defines the data structures stored per content id:
- Versions and their listing projection (Version, VersionSummary)
- Diffs between two contents (ContentDiff, DiffChanges, DiffHunk)
- Tags and publish records (Tag, PublishRecord)
- The persisted aggregate (ContentState)
- File store locks (Lock)

Document models serialize with camelCase field names, matching the
stored JSON shape:
    >>> from chronicle.models import ContentState
    >>> ContentState().to_document()["currentVersion"]
    0
"""

from .base import DocumentModel, utcnow
from .diff import ContentDiff, DiffChanges, DiffHunk
from .lock import Lock, new_owner_token
from .publish import PublishRecord
from .state import ContentState
from .tag import Tag
from .version import Version, VersionStatus, VersionSummary

__all__ = [
    "ContentDiff",
    "ContentState",
    "DiffChanges",
    "DiffHunk",
    "DocumentModel",
    "Lock",
    "PublishRecord",
    "Tag",
    "Version",
    "VersionStatus",
    "VersionSummary",
    "new_owner_token",
    "utcnow",
]
