from __future__ import annotations

import os

# Module settings
DEFAULT_ENCODING = os.getenv("DBFSTREAM_ENCODING", "utf-8")
DEFAULT_ENCODING_ERRORS = os.getenv("DBFSTREAM_ENCODING_ERRORS", "strict")

# Header layout
HEADER_SIZE = 32
DRIVER_NAME_SIZE = 32
DRIVER_RESERVED_SIZE = 4
YEAR_OFFSET = 1900
VERSION_MASK = 0x07

# Sentinel bytes
FIELD_TERMINATOR = 0x0D  # ends the field descriptor list
END_OF_DATA = 0x1A  # ends the record stream

# Descriptor block sizes per dialect
DESCRIPTOR_SIZE_III = 32
DESCRIPTOR_SIZE_IV = 48

DBASE_III = 3
DBASE_IV = 4

DIALECT_LOOKUP = {
    DBASE_III: "dBASE III",
    DBASE_IV: "dBASE IV",
}
