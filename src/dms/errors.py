"""Error types raised or reported by the dms components.

Each error carries the :class:`~dms.events.EventCode` under which it is
written to the event log, so callers can log it without a lookup of their own.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from .events import EventCode, message_for


class DmsError(Exception):
    """Base class for errors that map onto an event code."""

    def __init__(self, code: EventCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or message_for(code))


class ConfigurationError(DmsError):
    """A required command line value is missing."""

    FLAG_CODES: Dict[str, EventCode] = {
        "-f": EventCode.MISSING_SOURCE_DIR,
        "-i": EventCode.MISSING_INDEX_FILE,
        "-l": EventCode.MISSING_LOG_FILE,
        "-s": EventCode.MISSING_STORAGE_DIR,
    }

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(self.FLAG_CODES[flag])

    @classmethod
    def for_flag(cls, flag: str) -> "ConfigurationError":
        return cls(flag)


class ResourceError(DmsError):
    """The log file could not be opened for appending."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = str(path)
        self.reason = reason
        message = f"Cannot open log file {self.path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(EventCode.LOGFILE_FALLBACK, message)


__all__ = ["ConfigurationError", "DmsError", "ResourceError"]
