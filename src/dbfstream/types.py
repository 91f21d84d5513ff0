from __future__ import annotations

from os import PathLike
from typing import IO, Any, Final, Literal, Protocol, Union

## Custom type variables


class ReadableBinStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...


class ClosableBinStream(Protocol):
    def read(self, size: int = -1) -> bytes: ...
    def close(self) -> None: ...


# File name, file object or anything with a read() method that returns bytes.
BinaryFileT = Union[str, PathLike[Any], IO[bytes]]

FieldTypeT = Literal["C", "N"]


# https://en.wikipedia.org/wiki/.dbf#Database_records
class FieldType:
    """A bare bones 'enum', as the enum library noticeably slows performance.
    Only the types this reader interprets are listed; any other type tag
    read from a header is kept as the raw character."""

    C: Final = "C"  # "Character"  # (str)
    N: Final = "N"  # "Numeric"  # (int)
    __members__: set[FieldTypeT] = {
        "C",
        "N",
    }


# A value of a record field, as exposed by the reader
RecordValue = str
