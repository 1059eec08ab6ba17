"""Version ledger: creation, lookup, deletion and revert of versions.

All functions take the loaded ContentState and mutate it in place. Every
check that can fail runs before the first mutation, so a raised error
leaves the state untouched.

Version numbering:
- 0 means no version exists yet
- The first version is 1
- Ids are never reissued, even after the highest version is deleted
"""

import logging

from ..constants import DIFF_CONTEXT_LINES
from ..errors import ConflictError, NotFoundError
from ..models import ContentState, Version, VersionStatus, VersionSummary
from .diff_engine import compute_diff

logger = logging.getLogger(__name__)


def next_version_id(state: ContentState) -> int:
    """Return the id the next created version will get."""
    highest = max((v.id for v in state.versions), default=0)
    return max(highest, state.last_version_id) + 1


def find_version(state: ContentState, version_id: int) -> Version | None:
    """Return the version with the given id, or None."""
    return next((v for v in state.versions if v.id == version_id), None)


def get_version(state: ContentState, version_id: int) -> Version:
    """Return the version with the given id.

    Raises:
        NotFoundError: If no such version exists
    """
    version = find_version(state, version_id)
    if version is None:
        raise NotFoundError(f"Version {version_id} not found")
    return version


def get_current(state: ContentState) -> Version | None:
    """Return the active version, or None if nothing is active."""
    if not state.current_version:
        return None
    return find_version(state, state.current_version)


def list_versions(state: ContentState) -> list[Version]:
    """Return all versions in creation order."""
    return list(state.versions)


def list_version_summaries(state: ContentState) -> list[VersionSummary]:
    """Return versions in creation order without content or diff."""
    return [VersionSummary.from_version(v) for v in state.versions]


def set_current(state: ContentState, version: Version | None) -> None:
    """Point the current pointer (and its content copy) at a version."""
    if version is None:
        state.current_version = 0
        state.content = None
    else:
        state.current_version = version.id
        state.content = version.content


def _append(state: ContentState, version: Version) -> Version:
    state.versions.append(version)
    state.last_version_id = max(state.last_version_id, version.id)
    return version


def create_version(
    state: ContentState,
    content: str,
    message: str = "",
    *,
    context: int = DIFF_CONTEXT_LINES,
) -> Version:
    """Append a new draft version and make it current.

    The new version caches the diff from the previously current content.
    The first version (or one created while nothing is current) has no diff.

    Args:
        state: Loaded content state
        content: Full text of the new version
        message: Version annotation
        context: Diff context lines

    Returns:
        The created version
    """
    diff = None
    if state.current_version:
        diff = compute_diff(state.content, content, context=context)

    version = _append(
        state,
        Version(
            id=next_version_id(state),
            content=content,
            message=message,
            status=VersionStatus.DRAFT,
            diff=diff,
        ),
    )
    set_current(state, version)
    logger.info("Created version %d", version.id)
    return version


def revert(
    state: ContentState,
    version_id: int,
    *,
    context: int = DIFF_CONTEXT_LINES,
) -> Version:
    """Append a new draft version carrying an older version's content.

    The target version is not modified and the current pointer does not
    move. The new version's diff is taken against the latest version.

    Raises:
        NotFoundError: If the target version does not exist
    """
    target = get_version(state, version_id)
    latest = state.versions[-1]

    version = _append(
        state,
        Version(
            id=next_version_id(state),
            content=target.content,
            message=f"Reverted to version {version_id}",
            status=VersionStatus.DRAFT,
            diff=compute_diff(latest.content, target.content, context=context),
        ),
    )
    logger.info("Reverted to version %d as version %d", version_id, version.id)
    return version


def delete_version(state: ContentState, version_id: int) -> Version:
    """Delete a version and everything that references it.

    Tags pointing at the version and its publish records are removed in
    the same step. Deleting the current version clears the pointer.

    Raises:
        NotFoundError: If the version does not exist
        ConflictError: If the version is published
    """
    version = get_version(state, version_id)
    if version.status == VersionStatus.PUBLISHED:
        raise ConflictError(f"Cannot delete published version {version_id}")

    state.versions = [v for v in state.versions if v.id != version_id]
    state.tags = {name: tag for name, tag in state.tags.items() if tag.version_id != version_id}
    state.publish_history = [r for r in state.publish_history if r.version_id != version_id]
    if state.current_version == version_id:
        set_current(state, None)

    logger.info("Deleted version %d", version_id)
    return version
