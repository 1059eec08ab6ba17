"""Tests for chronicle data models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from chronicle.models import (
    ContentDiff,
    ContentState,
    DiffChanges,
    PublishRecord,
    Tag,
    Version,
    VersionStatus,
    VersionSummary,
)


def test_version_defaults():
    version = Version(id=1, content="hello")
    assert version.status == VersionStatus.DRAFT
    assert version.message == ""
    assert version.diff is None
    assert version.timestamp.tzinfo is not None


def test_version_id_must_be_positive():
    with pytest.raises(ValidationError):
        Version(id=0, content="x")


def test_state_document_field_names():
    """Documents use camelCase field names."""
    state = ContentState(
        current_version=1,
        versions=[Version(id=1, content="hi")],
        tags={"stable": Tag(name="stable", version_id=1)},
        content="hi",
        publish_history=[PublishRecord(version_id=1, published_by="alice")],
        last_version_id=1,
    )
    doc = state.to_document()

    assert set(doc) == {
        "currentVersion",
        "versions",
        "tags",
        "content",
        "publishHistory",
        "lastVersionId",
    }
    assert doc["tags"]["stable"]["versionId"] == 1
    assert doc["publishHistory"][0]["publishedBy"] == "alice"
    assert doc["publishHistory"][0]["unpublishedAt"] is None


def test_diff_from_field_alias():
    """The old-side label is stored as "from"."""
    diff = ContentDiff(
        from_="old version",
        to="new version",
        changes=DiffChanges(additions=1, deletions=0, total_changes=1),
        patch="",
    )
    doc = diff.to_document()
    assert doc["from"] == "old version"
    assert doc["changes"]["totalChanges"] == 1

    parsed = ContentDiff.model_validate(doc)
    assert parsed.from_ == "old version"


def test_state_parses_document():
    data = {
        "currentVersion": 2,
        "versions": [
            {"id": 1, "content": "a", "timestamp": "2024-01-01T00:00:00.000Z", "status": "published"},
            {"id": 2, "content": "b", "timestamp": "2024-01-02T00:00:00.000Z", "status": "draft"},
        ],
        "tags": {"v1": {"name": "v1", "versionId": 1, "createdAt": "2024-01-01T00:00:00.000Z"}},
        "content": "b",
    }
    state = ContentState.model_validate(data)

    assert state.current_version == 2
    assert state.versions[0].status == VersionStatus.PUBLISHED
    assert state.versions[0].timestamp == datetime(2024, 1, 1, tzinfo=UTC)
    assert state.tags["v1"].version_id == 1
    assert state.publish_history == []


def test_invalid_status_rejected():
    with pytest.raises(ValidationError):
        Version.model_validate({"id": 1, "content": "a", "status": "deleted"})


def test_publish_record_is_open():
    record = PublishRecord(version_id=1, published_by="alice")
    assert record.is_open
    record.unpublished_at = datetime.now(UTC)
    assert not record.is_open


def test_version_summary():
    version = Version(id=3, content="long text", message="msg")
    summary = VersionSummary.from_version(version)
    assert summary.id == 3
    assert summary.message == "msg"
    assert summary.status == VersionStatus.DRAFT
    assert summary.timestamp == version.timestamp
