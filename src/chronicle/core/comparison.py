"""Comparison of stored versions."""

from ..constants import DIFF_CONTEXT_LINES, PATCH_SEPARATOR
from ..errors import ConflictError
from ..models import ContentDiff, ContentState
from .diff_engine import compute_diff, create_patch
from .ledger import get_version

REPORT_FILENAME = "content.txt"


def compare(
    state: ContentState,
    from_id: int,
    to_id: int,
    *,
    context: int = DIFF_CONTEXT_LINES,
) -> ContentDiff:
    """Diff two stored versions in the caller's order.

    Comparing a newer version to an older one is allowed.

    Raises:
        NotFoundError: If either version does not exist
    """
    from_version = get_version(state, from_id)
    to_version = get_version(state, to_id)
    return compute_diff(
        from_version.content,
        to_version.content,
        f"Version {from_version.id}",
        f"Version {to_version.id}",
        context=context,
    )


def compare_previous(
    state: ContentState,
    version_id: int,
    *,
    context: int = DIFF_CONTEXT_LINES,
) -> ContentDiff:
    """Diff a version against the version just before it in the ledger.

    Raises:
        NotFoundError: If the version does not exist
        ConflictError: If it is the first version
    """
    version = get_version(state, version_id)
    index = state.versions.index(version)
    if index == 0:
        raise ConflictError(f"Version {version_id} has no previous version to compare with")
    return compare(state, state.versions[index - 1].id, version_id, context=context)


def formatted_diff(
    state: ContentState,
    from_id: int,
    to_id: int,
    *,
    context: int = DIFF_CONTEXT_LINES,
) -> str:
    """Render a human-readable comparison report.

    The report shows both full contents followed by the patch.

    Raises:
        NotFoundError: If either version does not exist
    """
    from_version = get_version(state, from_id)
    to_version = get_version(state, to_id)
    patch = create_patch(
        from_version.content,
        to_version.content,
        f"Version {from_version.id} ({from_version.message})",
        f"Version {to_version.id} ({to_version.message})",
        filename=REPORT_FILENAME,
        context=context,
    )
    return "\n".join(
        [
            f"Comparing Version {from_version.id} -> Version {to_version.id}",
            f"From: {from_version.message}",
            f"To: {to_version.message}",
            f"\nContent in Version {from_version.id}:",
            from_version.content,
            f"\nContent in Version {to_version.id}:",
            to_version.content,
            "\nDifferences:",
            PATCH_SEPARATOR,
            patch,
        ]
    )
