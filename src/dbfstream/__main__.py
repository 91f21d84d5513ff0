"""
Reports block id statistics for the .dbf tables inside census shapefile
bundles (TIGER/Line FACES, EDGES, TABBLOCK, ...).

    python -m dbfstream tl_2010_06075_tabblock10.zip
"""

from __future__ import annotations

import argparse
import logging
import sys
import zipfile
import zlib
from collections.abc import Sequence

from .__version__ import __version__
from .archive import iter_zip_dbfs
from .census import block_id_stats
from .constants import DEFAULT_ENCODING, DEFAULT_ENCODING_ERRORS
from .exceptions import DbfException, MissingFieldError

logger = logging.getLogger("dbfstream")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbfstream",
        description="Count well formed census block ids in zipped dbf tables.",
    )
    parser.add_argument("archives", nargs="+", metavar="ZIP")
    parser.add_argument("--encoding", default=DEFAULT_ENCODING)
    parser.add_argument("--encoding-errors", default=DEFAULT_ENCODING_ERRORS)
    parser.add_argument(
        "--histogram",
        action="store_true",
        help="also report how many block ids have each length",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logger.setLevel(logging.DEBUG if args.verbose else logging.INFO)
    for fname in args.archives:
        try:
            for name, dbf in iter_zip_dbfs(
                fname, encoding=args.encoding, encodingErrors=args.encoding_errors
            ):
                try:
                    stats = block_id_stats(dbf)
                except MissingFieldError as e:
                    logger.warning("%s %s: %s", fname, name, e.args[0])
                    continue
                logger.info(
                    "good ubid count=%d short=%d num records=%d",
                    stats.ok,
                    stats.short,
                    stats.numRecords,
                )
                if args.histogram:
                    for length, count in sorted(stats.lengths.items()):
                        logger.info("ubid length %d: %d", length, count)
        # a corrupt member fails its CRC or inflate check mid-stream
        except (DbfException, OSError, zipfile.BadZipFile, zlib.error) as e:
            logger.error("%s: %s", fname, e)
            return 1
    return 0


def main() -> None:
    logging.basicConfig(format="%(asctime)s %(message)s")
    sys.exit(run())


if __name__ == "__main__":
    main()
