"""Lock model for serializing writes to a stored content document.

A lock file guards each document so that only one writer runs a
load-mutate-save cycle on a content id at a time. Writers are told apart
by an owner token, so two stores in the same process do not mistake each
other's lock for their own.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


def new_owner_token() -> str:
    """Return a fresh lock owner token."""
    return uuid.uuid4().hex


class Lock(BaseModel):
    """Active document lock written to <store>/<content_id>.lock.

    Attributes:
        pid: Process ID of the lock holder, for stale detection.
        owner: Token of the writer holding the lock.
        content_id: Content id being modified.
        operation: Operation that acquired the lock.
        started_at: When the lock was acquired.
        last_heartbeat: Last heartbeat update (for stale detection).
    """

    pid: int = Field(description="Process ID holding the lock")
    owner: str = Field(default_factory=new_owner_token, description="Lock holder token")
    content_id: str = Field(description="Content id being modified")
    operation: str = Field(description="Operation that acquired lock")
    started_at: datetime = Field(default_factory=datetime.now)
    last_heartbeat: datetime = Field(default_factory=datetime.now)
