"""Publish workflow: exclusive publishing and the publish audit trail.

Per-version state machine:
    draft -> published          (publish)
    published -> draft          (unpublish, or another version is published)

The publish history is append-only. Unpublishing stamps ``unpublished_at``
on the open records of that version instead of deleting them.
"""

import logging

from ..models import ContentState, PublishRecord, Version, VersionStatus, utcnow
from .ledger import get_version, set_current

logger = logging.getLogger(__name__)


def get_published(state: ContentState) -> Version | None:
    """Return the published version, or None."""
    return next((v for v in state.versions if v.status == VersionStatus.PUBLISHED), None)


def publish(state: ContentState, version_id: int, published_by: str) -> PublishRecord:
    """Publish a version, demoting any other published version to draft.

    The published version also becomes current.

    Raises:
        NotFoundError: If the version does not exist
    """
    target = get_version(state, version_id)
    record = PublishRecord(version_id=version_id, published_by=published_by)

    for version in state.versions:
        if version.id != version_id and version.status == VersionStatus.PUBLISHED:
            version.status = VersionStatus.DRAFT
            logger.debug("Demoted version %d to draft", version.id)
    target.status = VersionStatus.PUBLISHED

    state.publish_history.append(record)
    set_current(state, target)

    logger.info("Published version %d by %s", version_id, published_by)
    return record


def unpublish(state: ContentState, version_id: int) -> Version:
    """Return a version to draft and close its publish records.

    If the version was current, nothing is current afterwards.

    Raises:
        NotFoundError: If the version does not exist
    """
    target = get_version(state, version_id)
    target.status = VersionStatus.DRAFT

    now = utcnow()
    for record in state.publish_history:
        if record.version_id == version_id and record.is_open:
            record.unpublished_at = now

    if state.current_version == version_id:
        set_current(state, None)

    logger.info("Unpublished version %d", version_id)
    return target


def get_publish_history(state: ContentState) -> list[PublishRecord]:
    """Return publish records in insertion order."""
    return list(state.publish_history)
