"""
Builders for in-memory dbf images used across the tests.
"""

import io
import struct

import pytest


class CountingStream(io.BytesIO):
    """A BytesIO that counts its reads and closes."""

    def __init__(self, data=b""):
        super().__init__(data)
        self.reads = 0
        self.closes = 0

    def read(self, size=-1):
        self.reads += 1
        return super().read(size)

    def close(self):
        self.closes += 1
        super().close()


class TrickleStream(CountingStream):
    """Returns at most one byte per read, like a slow pipe."""

    def read(self, size=-1):
        return super().read(1 if size != 0 else 0)


def build_dbf(
    fields,
    records=(),
    version=0x03,
    date=(110, 10, 19),
    num_records=None,
    record_bytes=None,
    driver_name=b"",
    eof=True,
    deletion_flag=b" ",
):
    """
    Returns the bytes of a dbf table.

    :param fields: list of (name, type, size, decimal) tuples
    :param records: list of value tuples, each value padded to its field size
    :param eof: append the 0x1A end of file marker
    """
    dialect4 = (version & 0x07) == 4
    descriptor_size = 48 if dialect4 else 32
    if record_bytes is None:
        record_bytes = 1 + sum(f[2] for f in fields)
    if num_records is None:
        num_records = len(records)
    header_bytes = 32 + (36 if dialect4 else 0) + descriptor_size * len(fields) + 1
    year, month, day = date
    out = io.BytesIO()
    out.write(
        struct.pack(
            "<4BLHH20x",
            version,
            year,
            month,
            day,
            num_records,
            header_bytes,
            record_bytes,
        )
    )
    if dialect4:
        out.write(driver_name.ljust(32, b" "))
        out.write(b"\0" * 4)
    for name, typ, size, decimal in fields:
        if dialect4:
            out.write(struct.pack("<32scBB13x", name.encode(), typ.encode(), size, decimal))
        else:
            out.write(struct.pack("<11sc4xBB14x", name.encode(), typ.encode(), size, decimal))
    out.write(b"\r")
    for values in records:
        out.write(deletion_flag)
        for (name, typ, size, decimal), value in zip(fields, values):
            if typ == "N":
                value = value.rjust(size)
            out.write(value.ljust(size).encode("latin-1"))
    if eof:
        out.write(b"\x1a")
    return out.getvalue()


BLOCK_FIELDS = [
    ("STATEFP10", "C", 2, 0),
    ("COUNTYFP10", "C", 3, 0),
    ("TRACTCE10", "C", 6, 0),
    ("BLOCKCE10", "C", 4, 0),
]


@pytest.fixture
def make_dbf():
    return build_dbf


@pytest.fixture
def block_dbf_bytes():
    """A four field census block table with two records."""
    return build_dbf(
        BLOCK_FIELDS,
        [("06", "001", "123456", "7890"), ("06", "075", "060100", "1")],
    )


@pytest.fixture
def counting_stream():
    return CountingStream


@pytest.fixture
def trickle_stream():
    return TrickleStream
