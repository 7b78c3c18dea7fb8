"""Pure session reconstruction - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterable

STOP_SUBJECT = "stop"
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class Session:
    """A work interval inferred from a start-like entry and a stop entry."""

    start: time | None = None
    end: time | None = None

    @property
    def is_closed(self) -> bool:
        return self.start is not None and self.end is not None

    def duration(self) -> timedelta:
        """Elapsed time, or zero if the session is not closed."""
        if not self.is_closed:
            return timedelta(0)
        return datetime.combine(date.min, self.end) - datetime.combine(date.min, self.start)


def parse_time(value: str) -> time | None:
    """Parse an HH:MM:SS string. Returns None if it doesn't parse."""
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except (TypeError, ValueError):
        return None


def reconstruct_sessions(entries: Iterable) -> list[Session]:
    """
    Pair entries into sessions in a single pass.

    A non-"stop" entry opens a session if none is open, otherwise it is
    ignored. A "stop" entry closes the open session, and is ignored when
    nothing is open or its time does not parse. A trailing open session is
    included.

    Pure function - no I/O.
    """
    completed: list[Session] = []
    open_session: Session | None = None

    for entry in entries:
        if entry.subject == STOP_SUBJECT:
            end = parse_time(entry.time)
            if open_session is None or end is None:
                continue
            completed.append(Session(start=open_session.start, end=end))
            open_session = None
        elif open_session is None:
            open_session = Session(start=parse_time(entry.time))

    if open_session is not None:
        completed.append(open_session)
    return completed


def total_duration(sessions: Iterable[Session]) -> timedelta:
    """Sum of closed session durations. Open sessions count as zero."""
    return sum((s.duration() for s in sessions if s.is_closed), timedelta(0))


def format_duration(delta: timedelta) -> str:
    """Format as HH:MM:SS, hours unbounded, with a leading '-' if negative."""
    seconds = int(delta.total_seconds())
    sign = "-" if seconds < 0 else ""
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
