from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ParsedArguments(BaseModel):
    """Values of the four command line options.

    Fields stay empty when the matching flag was not supplied.
    """

    model_config = ConfigDict(frozen=True)

    source_dir: str = ""
    index_file: str = ""
    log_file: str = ""
    storage_dir: str = ""


class EventRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str
    id: str
    prio: int
    code: int
    transaction: str
    src: str
