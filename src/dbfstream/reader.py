from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date
from types import TracebackType
from typing import NamedTuple

from .classes import Record
from .constants import (
    DBASE_III,
    DBASE_IV,
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
    DESCRIPTOR_SIZE_III,
    DESCRIPTOR_SIZE_IV,
    DIALECT_LOOKUP,
    DRIVER_NAME_SIZE,
    DRIVER_RESERVED_SIZE,
    END_OF_DATA,
    FIELD_TERMINATOR,
    HEADER_SIZE,
    VERSION_MASK,
    YEAR_OFFSET,
)
from .exceptions import DbfVersionError
from .fields import Field
from .helpers import read_exactly, unpack_dbf_header
from .types import ClosableBinStream

logger = logging.getLogger(__name__)


class _Dialect(NamedTuple):
    """Header layout selected once from the version byte."""

    descriptor_size: int
    has_driver_name: bool


_DIALECTS = {
    DBASE_III: _Dialect(DESCRIPTOR_SIZE_III, False),
    DBASE_IV: _Dialect(DESCRIPTOR_SIZE_IV, True),
}


class Dbf:
    """Streams the records of a dBASE (.dbf) table from a byte stream.

    The header is read as soon as the Dbf is created. Records are then read
    one at a time with advance(), which refills a single record buffer that
    all of the fields read from. Only sequential reads are needed, so the
    stream can be a zip member, a pipe or a socket file.

    The Dbf owns the stream: it is closed once the end of the data is
    reached, when a read fails, or when close() is called, whichever
    comes first.

    >>> with Dbf(open("tabblock.dbf", "rb")) as d:  # doctest: +SKIP
    ...     state = d.bestField(["STATEFP10", "STATEFP00"])
    ...     while d.advance():
    ...         print(d.string_value(state))
    """

    def __init__(
        self,
        stream: ClosableBinStream,
        *,
        encoding: str = DEFAULT_ENCODING,
        encodingErrors: str = DEFAULT_ENCODING_ERRORS,
        name: str = "Not specified",
    ):
        self.stream: ClosableBinStream | None = stream
        self.name = name
        self.encoding = encoding
        self.encodingErrors = encodingErrors
        self.version = 0
        self.year = 0
        self.month = 0
        self.day = 0
        self.numRecords = 0
        self.numHeaderBytes = 0
        self.numRecordBytes = 0
        self.incomplete = 0
        self.encrypted = 0
        self.mdx = 0
        self.language = 0
        self.driverName = ""
        self.fields: list[Field] = []
        self.recordLength = 0
        self.deletionFlag: int | None = None
        self.__fieldLookup: dict[str, Field] = {}
        self.__recordLookup: dict[str, int] = {}
        self.__oid = -1
        try:
            self._read_header()
        except Exception:
            # no partially read handle escapes
            self.close()
            raise
        self.__record = bytearray(self.recordLength)

    def _read_header(self) -> None:
        """Reads the fixed header, the optional dBASE IV driver name and the
        field descriptors up to the terminator byte."""
        stream = self.stream
        assert stream is not None
        (
            self.version,
            year,
            self.month,
            self.day,
            self.numRecords,
            self.numHeaderBytes,
            self.numRecordBytes,
            self.incomplete,
            self.encrypted,
            self.mdx,
            self.language,
        ) = unpack_dbf_header(read_exactly(stream, HEADER_SIZE))
        self.year = year + YEAR_OFFSET

        dialect = _DIALECTS.get(self.version & VERSION_MASK)
        if dialect is None:
            raise DbfVersionError(f"Unknown dbf version {self.version:#04x}")
        if dialect.has_driver_name:
            self.driverName = (
                read_exactly(stream, DRIVER_NAME_SIZE)
                .decode(self.encoding, self.encodingErrors)
                .strip()
            )
            read_exactly(stream, DRIVER_RESERVED_SIZE)

        start = 0
        lead = read_exactly(stream, 1)
        while lead[0] != FIELD_TERMINATOR:
            block = lead + read_exactly(stream, dialect.descriptor_size - 1)
            field = Field.from_bytes(
                block,
                start=start,
                encoding=self.encoding,
                encodingErrors=self.encodingErrors,
            )
            # first field of a name wins in lookups
            self.__fieldLookup.setdefault(field.name, field)
            self.__recordLookup.setdefault(field.name, len(self.fields))
            self.fields.append(field)
            start += field.size
            lead = read_exactly(stream, 1)

        self.recordLength = start
        if self.recordLength + 1 != self.numRecordBytes:
            logger.warning(
                "%s: header declares %d record bytes, fields add up to %d (+1 deletion flag)",
                self.name,
                self.numRecordBytes,
                self.recordLength,
            )
        logger.debug(
            "%s: %s header, %d records, %d fields, record length %d",
            self.name,
            DIALECT_LOOKUP[self.version & VERSION_MASK],
            self.numRecords,
            len(self.fields),
            self.recordLength,
        )

    def __str__(self) -> str:
        info = [f"dbf Reader {self.name}"]
        info.append(f"    {self.numRecords} records ({len(self.fields)} fields)")
        if self.stream is None:
            info.append("    closed")
        return "\n".join(info)

    def __enter__(self) -> Dbf:
        """
        Enter phase of context manager.
        """
        return self

    def __exit__(
        self,
        exc_type: BaseException | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool | None:
        """
        Exit phase of context manager, close the stream.
        """
        self.close()
        return None

    def __len__(self) -> int:
        """Returns the number of records declared in the header."""
        return self.numRecords

    def __iter__(self) -> Iterator[Record]:
        yield from self.iterRecords()

    def __del__(self) -> None:
        # __init__ may have failed before the stream was stored
        if getattr(self, "stream", None) is not None:
            self.close()

    @property
    def closed(self) -> bool:
        return self.stream is None

    @property
    def lastUpdate(self) -> date | None:
        """The header date, or None if it is not a valid date."""
        try:
            return date(self.year, self.month, self.day)
        except ValueError:
            return None

    def close(self) -> None:
        """Closes the stream. Calling close() again does nothing."""
        stream, self.stream = self.stream, None
        if stream is not None and hasattr(stream, "close"):
            stream.close()

    def advance(self) -> bool:
        """Reads the next record into the record buffer.

        Returns True if a record was read and False at the end of the data,
        which is either the end of the stream or the 0x1A end of file
        marker. Once the end is reached the stream is closed and every
        further call returns False without reading. A record cut short by
        the end of the stream raises ShortReadError; that and any error
        raised by the stream itself (OSError, zipfile.BadZipFile on a bad
        CRC, zlib.error) propagate and leave the Dbf closed.
        """
        stream = self.stream
        if stream is None:
            return False
        try:
            lead = stream.read(1)
            if not lead or lead[0] == END_OF_DATA:
                self.close()
                return False
            self.__record[:] = read_exactly(stream, self.recordLength)
        except Exception:
            self.close()
            raise
        self.deletionFlag = lead[0]
        self.__oid += 1
        return True

    def field(self, name: str) -> Field | None:
        """Returns the first field with exactly this name, or None."""
        return self.__fieldLookup.get(name)

    def bestField(self, names: Iterable[str]) -> Field | None:
        """Returns the field for the first of the candidate names that
        exists, or None if none of them do. Useful when a field was renamed
        between releases of a dataset, e.g. ["STATEFP10", "STATEFP00"]."""
        for name in names:
            field = self.field(name)
            if field is not None:
                return field
        return None

    @property
    def current(self) -> bytes:
        """A copy of the current record buffer."""
        return bytes(self.__record)

    def string_value(self, field: Field) -> str:
        """The trimmed value of a field in the current record."""
        return field.string_value(self.__record, self.encoding, self.encodingErrors)

    def int_value(self, field: Field) -> int:
        """The value of a field in the current record parsed as a base-10
        integer. Raises ValueError if it is not numeric text."""
        return field.int_value(self.__record, self.encoding, self.encodingErrors)

    def __getitem__(self, name: str) -> str:
        field = self.field(name)
        if field is None:
            raise KeyError(f"{name} is not a field name")
        return self.string_value(field)

    def record(self) -> Record:
        """Returns the current record's values as a Record."""
        values = [self.string_value(field) for field in self.fields]
        return Record(self.__recordLookup, values, self.__oid)

    def iterRecords(self) -> Iterator[Record]:
        """Returns a generator of the remaining records in the stream.
        Useful for large dbf files, as only one record is held at a time."""
        while self.advance():
            yield self.record()
