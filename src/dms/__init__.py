"""Document management system: argument checks and structured event logging."""

from .arguments import check_cmd_line_args
from .events import EventCode, Severity
from .logging_config import EventLogger, open_event_logger

__all__ = [
    "EventCode",
    "EventLogger",
    "Severity",
    "check_cmd_line_args",
    "open_event_logger",
]
