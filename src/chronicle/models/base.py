"""Shared base for persisted document models."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


class DocumentModel(BaseModel):
    """Base for models stored inside a content document.

    Python attributes are snake_case; the stored JSON uses camelCase
    (``currentVersion``, ``publishHistory``, ``versionId``...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Dump to a JSON-compatible dict using document field names."""
        return self.model_dump(mode="json", by_alias=True)
