from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .errors import ConfigurationError
from .models import ParsedArguments

# Option flag -> ParsedArguments field, in the order presence is checked.
FLAGS: Dict[str, str] = {
    "-f": "source_dir",
    "-i": "index_file",
    "-l": "log_file",
    "-s": "storage_dir",
}


def check_cmd_line_args(
    args: Sequence[str],
) -> Tuple[ParsedArguments, Optional[ConfigurationError]]:
    """Collect the values of ``-f``, ``-i``, ``-l`` and ``-s`` from ``args``.

    Every token is inspected; when it equals one of the flags, the following
    token is taken verbatim as the value. Unknown tokens are ignored and a
    repeated flag keeps its last value. A flag in last position has no value.

    Returns the parsed values together with a :class:`ConfigurationError` for
    the first missing value in flag order, or ``None`` when all are present.
    """
    values: Dict[str, str] = {}
    for i, token in enumerate(args):
        field = FLAGS.get(token)
        if field is not None and i + 1 < len(args):
            values[field] = args[i + 1]

    parsed = ParsedArguments(**values)

    for flag, field in FLAGS.items():
        if not getattr(parsed, field):
            return parsed, ConfigurationError.for_flag(flag)
    return parsed, None


__all__ = ["FLAGS", "check_cmd_line_args"]
