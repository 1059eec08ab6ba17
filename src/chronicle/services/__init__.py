"""Services wiring the core logic to storage.

- store: DocumentStore interface with in-memory and JSON file backends
- content: ContentService, the per-content-id operation surface
"""

from .content import ContentService
from .store import DocumentStore, FileStore, MemoryStore

__all__ = [
    "ContentService",
    "DocumentStore",
    "FileStore",
    "MemoryStore",
]
