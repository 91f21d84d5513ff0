"""
dbfstream
Streaming read support for dBASE (.dbf) tables, such as the attribute
tables inside census shapefile bundles.
Compatible with Python versions >=3.9
"""

from __future__ import annotations

import logging

from .__version__ import __version__
from .archive import iter_zip_dbfs, open_dbf
from .census import (
    BLOCK_ID_FIELDS,
    BlockIdFields,
    BlockIdStats,
    block_id,
    block_id_fields,
    block_id_stats,
)
from .classes import Record
from .constants import DBASE_III, DBASE_IV, END_OF_DATA, FIELD_TERMINATOR
from .exceptions import (
    BadHeaderLength,
    DbfException,
    DbfFormatError,
    DbfVersionError,
    MissingFieldError,
    ShortReadError,
)
from .fields import Field
from .helpers import dbtrim, fsdecode_if_pathlike
from .reader import Dbf
from .types import (
    BinaryFileT,
    ClosableBinStream,
    FieldType,
    FieldTypeT,
    ReadableBinStream,
    RecordValue,
)

__all__ = [
    "__version__",
    "DBASE_III",
    "DBASE_IV",
    "END_OF_DATA",
    "FIELD_TERMINATOR",
    "Dbf",
    "Field",
    "Record",
    "open_dbf",
    "iter_zip_dbfs",
    "BLOCK_ID_FIELDS",
    "BlockIdFields",
    "BlockIdStats",
    "block_id",
    "block_id_fields",
    "block_id_stats",
    "dbtrim",
    "fsdecode_if_pathlike",
    "BinaryFileT",
    "ClosableBinStream",
    "ReadableBinStream",
    "FieldType",
    "FieldTypeT",
    "RecordValue",
    "DbfException",
    "DbfFormatError",
    "DbfVersionError",
    "BadHeaderLength",
    "ShortReadError",
    "MissingFieldError",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
