"""Functional core - pure business logic with no I/O."""

from .log import Entry, Day, Tik
from .sessions import Session, reconstruct_sessions, total_duration, format_duration, parse_time

__all__ = [
    # Log
    "Entry",
    "Day",
    "Tik",
    # Sessions
    "Session",
    "reconstruct_sessions",
    "total_duration",
    "format_duration",
    "parse_time",
]
