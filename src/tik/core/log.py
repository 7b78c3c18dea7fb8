"""Dated entry log data model and YAML document format."""

import logging
from dataclasses import dataclass, field
from datetime import timedelta

import yaml

from .sessions import Session, reconstruct_sessions, total_duration

logger = logging.getLogger(__name__)

EMPTY_DOCUMENT = "---\n"


def _text(value) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Entry:
    """One recorded (time, subject) observation."""

    time: str
    subject: str

    def __str__(self) -> str:
        return f"{self.time} -> {self.subject}"

    def to_dict(self) -> dict:
        return {"time": self.time, "subject": self.subject}


@dataclass
class Day:
    """All entries recorded on one date, in the order they were added."""

    date: str
    entries: list[Entry] = field(default_factory=list)

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)

    def sessions(self) -> list[Session]:
        """Sessions derived fresh from this day's entries."""
        return reconstruct_sessions(self.entries)

    def duration(self) -> timedelta:
        return total_duration(self.sessions())

    def to_dict(self) -> dict:
        return {"date": self.date, "entries": [e.to_dict() for e in self.entries]}


@dataclass
class Tik:
    """The full log: one Day per date string."""

    days: dict[str, Day] = field(default_factory=dict)

    def add_entry(self, date: str, entry: Entry) -> None:
        """Append to the Day for `date`, creating it if needed."""
        day = self.days.get(date)
        if day is None:
            self.days[date] = Day(date=date, entries=[entry])
        else:
            day.add_entry(entry)

    def get_day(self, date: str) -> Day | None:
        return self.days.get(date)

    def sessions_for(self, date: str) -> list[Session]:
        day = self.days.get(date)
        if day is None:
            return []
        return day.sessions()

    def duration_for(self, date: str) -> timedelta:
        """Total closed-session time for a date, zero if absent."""
        day = self.days.get(date)
        if day is None:
            return timedelta(0)
        return day.duration()

    def to_dict(self) -> dict:
        return {"days": [day.to_dict() for day in self.days.values()]}

    def to_yaml(self) -> str:
        """Serialize to a YAML document. Falls back to an empty document."""
        try:
            return yaml.safe_dump(
                self.to_dict(),
                explicit_start=True,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            logger.debug(f"Failed to serialize log: {e}")
            return EMPTY_DOCUMENT

    @classmethod
    def from_dict(cls, data: dict) -> "Tik":
        """
        Build a log from parsed document data.

        Raises KeyError/TypeError/AttributeError on unexpected structure,
        including non-string scalars.
        Repeated dates are merged into a single Day.
        """
        tik = cls()
        for day in data["days"] or []:
            date = _text(day["date"])
            for item in day.get("entries") or []:
                tik.add_entry(date, Entry(time=_text(item["time"]), subject=_text(item["subject"])))
        return tik

    @classmethod
    def from_yaml(cls, content: str | None) -> "Tik":
        """Parse a YAML document. Anything unreadable yields an empty log."""
        if not content:
            return cls()
        try:
            # BaseLoader keeps every scalar as a plain string
            data = yaml.load(content, Loader=yaml.BaseLoader)
            if data is None:
                return cls()
            return cls.from_dict(data)
        except (yaml.YAMLError, KeyError, TypeError, AttributeError, ValueError) as e:
            logger.debug(f"Ignoring unreadable log document: {e}")
            return cls()
