"""Version models: immutable content snapshots in a ledger."""

from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import DocumentModel, utcnow
from .diff import ContentDiff


class VersionStatus(str, Enum):
    """Publish state of a version."""

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Version(DocumentModel):
    """A full-content snapshot of a document.

    Attributes:
        id: Ledger-unique id, assigned monotonically and never reused.
        content: Complete text of this version.
        timestamp: When the version was created.
        message: Free-text annotation.
        status: Draft, published or archived.
        diff: Diff from the previously current content, computed at creation.
    """

    id: int = Field(ge=1, description="Version id")
    content: str = Field(description="Full content snapshot")
    timestamp: datetime = Field(default_factory=utcnow)
    message: str = Field(default="", description="Version annotation")
    status: VersionStatus = Field(default=VersionStatus.DRAFT)
    diff: ContentDiff | None = Field(default=None, description="Diff cached at creation")


class VersionSummary(DocumentModel):
    """Metadata-only projection of a version, used for bulk listing."""

    id: int
    timestamp: datetime
    message: str
    status: VersionStatus

    @classmethod
    def from_version(cls, version: Version) -> "VersionSummary":
        return cls(
            id=version.id,
            timestamp=version.timestamp,
            message=version.message,
            status=version.status,
        )
