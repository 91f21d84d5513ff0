"""
Opening dbf tables from files, file-like objects and zip bundles.

Census TIGER/Line products ship as zip archives holding a shapefile, whose
attribute table is a .dbf member. The members are read straight from the
archive without extracting them, since the reader only needs a sequential
stream.
"""

from __future__ import annotations

import logging
import os
import zipfile
from collections.abc import Iterator
from os import PathLike
from typing import IO, Any

from .constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from .exceptions import DbfException
from .helpers import fsdecode_if_pathlike
from .reader import Dbf
from .types import BinaryFileT

logger = logging.getLogger(__name__)

DBF_EXT = ".dbf"


def is_dbf_member(name: str) -> bool:
    return name.lower().endswith(DBF_EXT)


def open_dbf(
    source: BinaryFileT,
    *,
    encoding: str = DEFAULT_ENCODING,
    encodingErrors: str = DEFAULT_ENCODING_ERRORS,
) -> Dbf:
    """Opens a dbf from a file name or a binary file-like object. The
    returned Dbf owns the stream and closes it when done."""
    path = fsdecode_if_pathlike(source)
    if isinstance(path, str):
        try:
            stream: IO[bytes] = open(path, "rb")
        except OSError as e:
            raise DbfException(f"Unable to open {path}: {e}") from e
        return Dbf(stream, encoding=encoding, encodingErrors=encodingErrors, name=path)

    if hasattr(source, "read"):
        return Dbf(
            source,
            encoding=encoding,
            encodingErrors=encodingErrors,
            name=getattr(source, "name", "Not specified"),
        )

    raise DbfException(f"Could not load dbf from: {source}")


def _split_zip_path(path: str) -> tuple[str, str | None]:
    """Splits 'bundle.zip/member.dbf' into the archive path and member name."""
    if path.count(".zip") > 1:
        raise DbfException(
            f"Reading from multiple nested zipfiles is not supported: {path}"
        )
    if ".zip" not in path or path.endswith(".zip"):
        return path, None
    zpath = path[: path.find(".zip") + 4]
    member = path[path.find(".zip") + 4 + 1 :]
    return zpath, member or None


def iter_zip_dbfs(
    archive_path: str | PathLike[Any],
    *,
    encoding: str = DEFAULT_ENCODING,
    encodingErrors: str = DEFAULT_ENCODING_ERRORS,
) -> Iterator[tuple[str, Dbf]]:
    """Yields (member name, Dbf) for each .dbf member of a zip archive.

    A path of the form 'bundle.zip/member.dbf' selects a single member.
    Each Dbf streams from the archive, so it must be read before the
    generator is advanced; any Dbf left open is closed when the next one
    is produced or the archive is closed.
    """
    path = fsdecode_if_pathlike(archive_path)
    zpath, wanted = _split_zip_path(path)
    try:
        archive = zipfile.ZipFile(zpath, "r")
    except (OSError, zipfile.BadZipFile) as e:
        raise DbfException(f"Unable to open zipfile {zpath}: {e}") from e

    with archive:
        if wanted is not None:
            names = [wanted]
        else:
            names = [name for name in archive.namelist() if is_dbf_member(name)]
        if not names:
            logger.info("%s: no dbf members", zpath)
        for name in names:
            try:
                member = archive.open(name)
            except KeyError as e:
                raise DbfException(f"{name} not found in zipfile {zpath}") from e
            logger.info("%s %s", zpath, name)
            dbf = Dbf(
                member,
                encoding=encoding,
                encodingErrors=encodingErrors,
                name=f"{os.path.basename(zpath)}/{name}",
            )
            try:
                yield name, dbf
            finally:
                dbf.close()
