from __future__ import annotations

import logging
from enum import IntEnum
from typing import Dict

# An event code is a six digit number; the leading group is its severity tier.
TIER_DIVISOR = 100000

DEFAULT_NAMESPACE = "AbcdsDMS"
DEFAULT_SERVICE_NAME = "Abcdsdms"


class Severity(IntEnum):
    """Syslog-like severity tiers carried by event codes."""

    PANIC = 1
    FATAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def level(self) -> int:
        """Standard ``logging`` level used to gate records of this tier."""
        return _LEVELS[self]


_LABELS: Dict[Severity, str] = {
    Severity.PANIC: "critical",
    Severity.FATAL: "fatal",
    Severity.ERROR: "error",
    Severity.WARNING: "warning",
    Severity.NOTICE: "info",
    Severity.INFO: "info",
    Severity.DEBUG: "debug",
}

_LEVELS: Dict[Severity, int] = {
    Severity.PANIC: logging.CRITICAL,
    Severity.FATAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}


class EventCode(IntEnum):
    MISSING_SOURCE_DIR = 100001
    MISSING_INDEX_FILE = 100002
    MISSING_LOG_FILE = 100003
    MISSING_STORAGE_DIR = 100004
    LOGFILE_FALLBACK = 200001
    SERVICE_STARTED = 700001

    @property
    def tier(self) -> int:
        return tier_of(self)

    @property
    def severity(self) -> Severity:
        return severity_of(self)


MESSAGES: Dict[int, str] = {
    EventCode.MISSING_SOURCE_DIR: "Missing command line argument -f",
    EventCode.MISSING_INDEX_FILE: "Missing command line argument -i",
    EventCode.MISSING_LOG_FILE: "Missing command line argument -l",
    EventCode.MISSING_STORAGE_DIR: "Missing command line argument -s",
    EventCode.LOGFILE_FALLBACK: "Error with your logfile, set file to STDOUT",
    EventCode.SERVICE_STARTED: "{service} started",
}


def tier_of(code: int) -> int:
    """Return the severity tier encoded in ``code``."""
    return int(code) // TIER_DIVISOR


def severity_of(code: int) -> Severity:
    """Map ``code`` to its :class:`Severity`.

    The mapping is total: tiers outside ``1..7`` are treated as fatal.
    """
    try:
        return Severity(tier_of(code))
    except ValueError:
        return Severity.FATAL


def message_for(code: int, service: str = DEFAULT_SERVICE_NAME) -> str:
    """Return the human readable message for ``code``.

    Unknown codes resolve to an empty string instead of raising.
    """
    template = MESSAGES.get(int(code), "")
    return template.format(service=service)


def composite_id(code: int, namespace: str = DEFAULT_NAMESPACE) -> str:
    """Build the ``<namespace>-<tier>-<code>`` identifier, e.g. ``AbcdsDMS-7-700001``."""
    return f"{namespace}-{tier_of(code)}-{int(code)}"


__all__ = [
    "EventCode",
    "MESSAGES",
    "Severity",
    "composite_id",
    "message_for",
    "severity_of",
    "tier_of",
]
