from __future__ import annotations

import os
import re
import string
from os import PathLike
from struct import Struct
from typing import Any, TypeVar, overload

from .exceptions import ShortReadError
from .types import ReadableBinStream

T = TypeVar("T")

# Helpers

# version, year, month, day, record count, header bytes, record bytes,
# incomplete, encrypted, mdx, language
unpack_dbf_header = Struct("<4BLHH2xBB12xBB2x").unpack
# name, type, length, decimal count
unpack_field_iii = Struct("<11sc4xBB14x").unpack
unpack_field_iv = Struct("<32scBB13x").unpack

_INTEGER = re.compile(r"[+-]?[0-9]+")
_TRIM_CHARS = "\x00" + string.whitespace


@overload
def fsdecode_if_pathlike(path: PathLike[Any]) -> str: ...
@overload
def fsdecode_if_pathlike(path: T) -> T: ...
def fsdecode_if_pathlike(path: Any) -> Any:
    if isinstance(path, PathLike):
        return os.fsdecode(path)  # str

    return path


def read_exactly(stream: ReadableBinStream, size: int) -> bytes:
    """Reads exactly size bytes from a stream that may return short reads,
    raising ShortReadError if the stream ends first."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise ShortReadError(
                f"Unexpected end of dbf stream: wanted {size} bytes, got {size - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def dbtrim(value: str) -> str:
    """Strips NUL bytes and whitespace from both ends of a string."""
    return value.strip(_TRIM_CHARS)


def parse_int(text: str) -> int:
    """Parses base-10 text with an optional sign. Unlike int(), rejects
    underscores, surrounding whitespace and non-ASCII digits."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid base-10 integer: {text!r}")
    return int(text)
