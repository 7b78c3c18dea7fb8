"""Adapters - I/O implementations of ports."""

from .file_store import FileLogStore

__all__ = [
    "FileLogStore",
]
