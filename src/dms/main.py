"""Entry point of the dms command.

Usage: ``dms -f <filing dir> -i <index file> -l <log file> -s <storage dir>``

Checks the command line, opens the event log and records the start of the
service. Filing of the documents themselves is not implemented yet.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .arguments import check_cmd_line_args
from .config import get_settings
from .logging_config import EventLogger, open_event_logger, setup_logging
from .events import EventCode

logger = logging.getLogger(__name__)

SOURCE = "main"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the service and return the process exit status."""
    settings = get_settings()
    setup_logging(settings.diagnostic_level, None)

    args, err = check_cmd_line_args(sys.argv[1:] if argv is None else argv)
    if err is not None:
        with EventLogger(sys.stdout, settings) as console:
            console.log(err.code, settings.transaction_id, SOURCE)
        if settings.halt_on_error:
            logger.error("Aborting: %s", err)
            return 1
        logger.warning("Continuing without %s value", err.flag)

    with open_event_logger(args.log_file, settings, SOURCE) as events:
        events.log(EventCode.SERVICE_STARTED, settings.transaction_id, SOURCE)
        print(f"{args.source_dir} {args.index_file} {args.storage_dir} {args.log_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
