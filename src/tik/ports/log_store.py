"""Log storage interface."""

from typing import Protocol


class LogStore(Protocol):
    """Interface for reading and writing the raw log document."""

    def read(self) -> str | None:
        """Read the whole document. Returns None if it can't be read."""
        ...

    def write(self, content: str) -> None:
        """Write/overwrite the whole document. Raises OSError on failure."""
        ...

    def exists(self) -> bool:
        """Check if the document has been written yet."""
        ...
