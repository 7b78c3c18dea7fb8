"""Shared workflow layer between the CLI and the core.

Each function loads the log from a store, performs one operation, and saves
it back if anything changed. Save failures raise OSError.
"""

import logging
from datetime import datetime, timedelta

from .core.log import Entry, Tik
from .core.sessions import STOP_SUBJECT
from .ports.log_store import LogStore

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


def stamp(now: datetime) -> tuple[str, str]:
    """Date and time strings for a moment, as stored in the log."""
    return now.strftime(DATE_FORMAT), now.strftime(TIME_FORMAT)


def load_log(store: LogStore) -> Tik:
    """Load the log, treating any read failure as an empty log."""
    return Tik.from_yaml(store.read())


def save_log(store: LogStore, tik: Tik) -> None:
    store.write(tik.to_yaml())


def show_log(store: LogStore) -> str:
    """The full current document."""
    return load_log(store).to_yaml()


def record_entry(store: LogStore, subject: str, now: datetime | None = None) -> Entry:
    """Append an entry for today at the current time and save."""
    today, time_str = stamp(now or datetime.now())
    entry = Entry(time=time_str, subject=subject)

    tik = load_log(store)
    tik.add_entry(today, entry)
    save_log(store, tik)
    logger.debug(f"Recorded {entry} on {today}")
    return entry


def count_today(store: LogStore, now: datetime | None = None) -> timedelta:
    """Stop the running session, save, and return today's total tracked time."""
    today, time_str = stamp(now or datetime.now())

    tik = load_log(store)
    tik.add_entry(today, Entry(time=time_str, subject=STOP_SUBJECT))
    total = tik.duration_for(today)
    save_log(store, tik)
    logger.debug(f"Total for {today}: {total}")
    return total
