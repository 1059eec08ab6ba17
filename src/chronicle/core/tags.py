"""Tag registry: unique names pointing at versions."""

import logging

from ..errors import ConflictError, NotFoundError
from ..models import ContentState, Tag, utcnow
from .identifiers import validate_tag_name
from .ledger import get_version

logger = logging.getLogger(__name__)


def list_tags(state: ContentState) -> list[Tag]:
    """Return all tags in creation order."""
    return list(state.tags.values())


def list_tags_for_version(state: ContentState, version_id: int) -> list[Tag]:
    """Return the tags pointing at a version (empty for unknown versions)."""
    return [tag for tag in state.tags.values() if tag.version_id == version_id]


def get_tag(state: ContentState, name: str) -> Tag:
    """Return a tag by name.

    Raises:
        NotFoundError: If no tag has that name
    """
    tag = state.tags.get(name)
    if tag is None:
        raise NotFoundError(f"Tag {name!r} not found")
    return tag


def create_tag(state: ContentState, version_id: int, name: str) -> Tag:
    """Tag a version.

    Raises:
        InvalidArgumentError: If the name is blank
        NotFoundError: If the version does not exist
        ConflictError: If the name is already used
    """
    validate_tag_name(name)
    get_version(state, version_id)
    if name in state.tags:
        raise ConflictError(f"Tag {name!r} already exists")

    tag = Tag(name=name, version_id=version_id)
    state.tags[name] = tag
    logger.info("Tagged version %d as %s", version_id, name)
    return tag


def rename_tag(state: ContentState, old_name: str, new_name: str) -> Tag:
    """Rename a tag, keeping its version and creation time.

    Names compare exactly, so renaming a tag to its own name is a conflict.

    Raises:
        InvalidArgumentError: If the new name is blank
        NotFoundError: If the old tag does not exist
        ConflictError: If the new name is already used
    """
    validate_tag_name(new_name)
    tag = get_tag(state, old_name)
    if new_name in state.tags:
        raise ConflictError(f"Tag {new_name!r} already exists")

    renamed = tag.model_copy(update={"name": new_name, "updated_at": utcnow()})
    del state.tags[old_name]
    state.tags[new_name] = renamed
    logger.info("Renamed tag %s to %s", old_name, new_name)
    return renamed


def delete_tag(state: ContentState, name: str) -> Tag:
    """Delete a tag.

    Raises:
        NotFoundError: If the tag does not exist
    """
    tag = get_tag(state, name)
    del state.tags[name]
    logger.info("Deleted tag %s", name)
    return tag
