"""Content state aggregate: the single persisted document per content id."""

from pydantic import Field

from .base import DocumentModel
from .publish import PublishRecord
from .tag import Tag
from .version import Version


class ContentState(DocumentModel):
    """Ledger, tags, publish history and current pointer of one content id.

    Attributes:
        current_version: Id of the active version (0 if none).
        versions: Versions in creation order.
        tags: Tags keyed by name.
        content: Text of the active version (None if none).
        publish_history: Publish records in insertion order.
        last_version_id: Highest version id ever issued.
    """

    current_version: int = Field(default=0, ge=0)
    versions: list[Version] = Field(default_factory=list)
    tags: dict[str, Tag] = Field(default_factory=dict)
    content: str | None = None
    publish_history: list[PublishRecord] = Field(default_factory=list)
    last_version_id: int = Field(default=0, ge=0)
