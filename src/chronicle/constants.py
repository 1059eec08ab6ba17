"""Constants for chronicle."""

DEFAULT_CONTENT_ID = "default"
CHRONICLE_DIR_NAME = ".chronicle"
CHRONICLE_DIR_ENV = "CHRONICLE_DIR"

# Unified diff rendering
DIFF_CONTEXT_LINES = 4
PATCH_SEPARATOR = "=" * 67
NO_NEWLINE_MARKER = "\\ No newline at end of file"

# File store locking (seconds)
LOCK_TIMEOUT = 10.0
LOCK_POLL_INTERVAL = 0.05
