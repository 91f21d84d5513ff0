from __future__ import annotations

from typing import NamedTuple

from .constants import (
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
    DESCRIPTOR_SIZE_III,
    DESCRIPTOR_SIZE_IV,
)
from .exceptions import BadHeaderLength
from .helpers import dbtrim, parse_int, unpack_field_iii, unpack_field_iv


class Field(NamedTuple):
    """One column of a dbf table.

    A Field does not hold the record it reads from. The owning Dbf keeps a
    single record buffer which is refilled on every advance; the value
    accessors take that buffer explicitly, or can be reached through
    Dbf.string_value(field) and Dbf.int_value(field).
    """

    name: str
    field_type: str
    size: int
    decimal: int
    # Calculated (not read from the file) offset within the record buffer
    start: int = 0

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        start: int = 0,
        encoding: str = DEFAULT_ENCODING,
        encodingErrors: str = DEFAULT_ENCODING_ERRORS,
    ) -> Field:
        """Parses a 32 byte (dBASE III) or 48 byte (dBASE IV) field
        descriptor block."""
        if len(data) == DESCRIPTOR_SIZE_III:
            encoded_name, encoded_type, size, decimal = unpack_field_iii(data)
        elif len(data) == DESCRIPTOR_SIZE_IV:
            encoded_name, encoded_type, size, decimal = unpack_field_iv(data)
        else:
            raise BadHeaderLength(
                f"Bad dbf header length: field descriptor of {len(data)} bytes, "
                f"expected {DESCRIPTOR_SIZE_III} or {DESCRIPTOR_SIZE_IV}"
            )
        name = dbtrim(encoded_name.decode(encoding, encodingErrors))
        # type tags other than C and N are kept as read
        field_type = encoded_type.decode("latin-1")
        return cls(name, field_type, size, decimal, start)

    @property
    def end(self) -> int:
        return self.start + self.size

    def raw(self, buffer: bytes | bytearray) -> bytes:
        """Returns this field's bytes from a record buffer."""
        return bytes(buffer[self.start : self.end])

    def string_value(
        self,
        buffer: bytes | bytearray,
        encoding: str = DEFAULT_ENCODING,
        encodingErrors: str = DEFAULT_ENCODING_ERRORS,
    ) -> str:
        """Returns this field's value in a record buffer as a trimmed string."""
        return dbtrim(self.raw(buffer).decode(encoding, encodingErrors))

    def int_value(
        self,
        buffer: bytes | bytearray,
        encoding: str = DEFAULT_ENCODING,
        encodingErrors: str = DEFAULT_ENCODING_ERRORS,
    ) -> int:
        """Parses this field's trimmed value as a base-10 integer.
        Raises ValueError if the text is not numeric."""
        return parse_int(self.string_value(buffer, encoding, encodingErrors))

    def __repr__(self) -> str:
        return (
            f'Field(name="{self.name}", field_type="{self.field_type}", '
            f"size={self.size}, decimal={self.decimal}, start={self.start})"
        )
