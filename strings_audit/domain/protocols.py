from pathlib import Path
from typing import Protocol, runtime_checkable

from strings_audit.domain.entities import ResourceRecordSet


class StringsParseError(Exception):
    """Raised by a StringsParser when a file is unreadable or malformed."""

    def __init__(self, path: str | Path, reason: str, line: int | None = None):
        self.path = str(path)
        self.reason = reason
        self.line = line
        location = f"{self.path}:{line}" if line is not None else self.path
        super().__init__(f"{location}: {reason}")


@runtime_checkable
class StringsParser(Protocol):
    """Interface for resource-file parsers (.strings today)."""

    def __call__(self, path: Path) -> ResourceRecordSet:
        """Parse ``path``; raise StringsParseError on failure."""
        ...


@runtime_checkable
class LocaleGroupFinder(Protocol):
    """Interface for locale-group directory discovery."""

    def __call__(self, root: Path, strings_filename: str) -> list[Path]:
        """Ordered locale-group directories under ``root`` holding ``strings_filename``."""
        ...
