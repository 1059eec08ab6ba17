"""Publish audit trail records."""

from datetime import datetime

from pydantic import Field

from .base import DocumentModel, utcnow


class PublishRecord(DocumentModel):
    """Append-only record of a publish event.

    Unpublishing does not remove the record; it stamps ``unpublished_at``
    on the records that were still open for that version.
    """

    version_id: int = Field(ge=1)
    published_at: datetime = Field(default_factory=utcnow)
    published_by: str
    unpublished_at: datetime | None = None

    @property
    def is_open(self) -> bool:
        return self.unpublished_at is None
