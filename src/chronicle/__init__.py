"""Chronicle: linear version history for content documents."""

__version__ = "0.1.0"
