"""Content service: the operation surface over one content id.

Each mutating operation is one load-mutate-save cycle held under the
store's lock for the content id. Core functions validate before they
mutate, so a failing operation raises before anything is saved.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from ..constants import DEFAULT_CONTENT_ID, DIFF_CONTEXT_LINES
from ..core import comparison, ledger, publishing, tags
from ..core.identifiers import (
    coerce_version_id,
    validate_content,
    validate_content_id,
    validate_text,
)
from ..models import ContentDiff, ContentState, PublishRecord, Tag, Version, VersionSummary
from .store import DocumentStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ContentService:
    """Version history operations for a single content id.

    Version ids may be passed as ints or decimal strings; anything else
    raises InvalidArgumentError.
    """

    def __init__(
        self,
        store: DocumentStore,
        content_id: str = DEFAULT_CONTENT_ID,
        *,
        diff_context: int = DIFF_CONTEXT_LINES,
    ) -> None:
        self.store = store
        self.content_id = validate_content_id(content_id)
        self.diff_context = diff_context

    def get_state(self) -> ContentState:
        """Load the aggregate, or an empty one if nothing is stored yet."""
        state = self.store.load(self.content_id)
        if state is None:
            logger.debug("No document for %s, starting empty", self.content_id)
            return ContentState()
        return state

    def _mutate(self, operation: str, apply: Callable[[ContentState], T]) -> T:
        with self.store.lock(self.content_id, operation):
            state = self.get_state()
            result = apply(state)
            self.store.save(self.content_id, state)
        return result

    # Version ledger

    def create_version(self, content: str, message: str = "") -> Version:
        validate_content(content)
        validate_text(message, "Message")
        return self._mutate(
            "create_version",
            lambda state: ledger.create_version(
                state, content, message, context=self.diff_context
            ),
        )

    def get_version(self, version_id: int | str) -> Version:
        return ledger.get_version(self.get_state(), coerce_version_id(version_id))

    def get_current(self) -> Version | None:
        return ledger.get_current(self.get_state())

    def list_versions(self) -> list[Version]:
        return ledger.list_versions(self.get_state())

    def list_version_summaries(self) -> list[VersionSummary]:
        return ledger.list_version_summaries(self.get_state())

    def delete_version(self, version_id: int | str) -> Version:
        vid = coerce_version_id(version_id)
        return self._mutate("delete_version", lambda state: ledger.delete_version(state, vid))

    def revert(self, version_id: int | str) -> Version:
        vid = coerce_version_id(version_id)
        return self._mutate(
            "revert",
            lambda state: ledger.revert(state, vid, context=self.diff_context),
        )

    # Tag registry

    def create_tag(self, version_id: int | str, name: str) -> Tag:
        vid = coerce_version_id(version_id)
        return self._mutate("create_tag", lambda state: tags.create_tag(state, vid, name))

    def rename_tag(self, old_name: str, new_name: str) -> Tag:
        return self._mutate(
            "rename_tag", lambda state: tags.rename_tag(state, old_name, new_name)
        )

    def delete_tag(self, name: str) -> Tag:
        return self._mutate("delete_tag", lambda state: tags.delete_tag(state, name))

    def list_tags(self) -> list[Tag]:
        return tags.list_tags(self.get_state())

    def list_tags_for_version(self, version_id: int | str) -> list[Tag]:
        return tags.list_tags_for_version(self.get_state(), coerce_version_id(version_id))

    # Publish workflow

    def publish(self, version_id: int | str, published_by: str) -> PublishRecord:
        vid = coerce_version_id(version_id)
        validate_text(published_by, "Publisher", allow_blank=False)
        return self._mutate(
            "publish", lambda state: publishing.publish(state, vid, published_by)
        )

    def unpublish(self, version_id: int | str) -> Version:
        vid = coerce_version_id(version_id)
        return self._mutate("unpublish", lambda state: publishing.unpublish(state, vid))

    def get_publish_history(self) -> list[PublishRecord]:
        return publishing.get_publish_history(self.get_state())

    # Comparison

    def compare(self, from_id: int | str, to_id: int | str) -> ContentDiff:
        return comparison.compare(
            self.get_state(),
            coerce_version_id(from_id),
            coerce_version_id(to_id),
            context=self.diff_context,
        )

    def compare_previous(self, version_id: int | str) -> ContentDiff:
        return comparison.compare_previous(
            self.get_state(), coerce_version_id(version_id), context=self.diff_context
        )

    def formatted_diff(self, from_id: int | str, to_id: int | str) -> str:
        return comparison.formatted_diff(
            self.get_state(),
            coerce_version_id(from_id),
            coerce_version_id(to_id),
            context=self.diff_context,
        )
