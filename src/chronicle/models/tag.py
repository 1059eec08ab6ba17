"""Tag model: a unique name pointing at a version."""

from datetime import datetime

from pydantic import Field

from .base import DocumentModel, utcnow


class Tag(DocumentModel):
    """Named reference to a version.

    Attributes:
        name: Tag name, unique within a content id.
        version_id: Id of the tagged version.
        created_at: When the tag was created.
        updated_at: When the tag was last renamed (None if never).
    """

    name: str
    version_id: int = Field(ge=1)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime | None = None
