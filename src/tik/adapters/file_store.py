"""File-based log storage adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileLogStore:
    """
    Single-file log storage.

    Implements LogStore protocol. The whole log lives in one text document.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def read(self) -> str | None:
        """Read the document. Returns None if missing or unreadable."""
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {self.path}: {e}")
            return None

    def write(self, content: str) -> None:
        """Write/overwrite the document."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(content, encoding="utf-8")

    def exists(self) -> bool:
        return self.path.exists()
