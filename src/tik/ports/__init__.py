"""Ports - interfaces/protocols for external dependencies."""

from .log_store import LogStore

__all__ = [
    "LogStore",
]
