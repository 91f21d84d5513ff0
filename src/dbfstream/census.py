"""
Census block id (UBID) statistics.

A census block is identified by the concatenation of its state (2 digits),
county (3), tract (6) and block (4) codes, 15 characters in all. The field
names carry the decennial vintage, e.g. STATEFP10 in 2010 products and
STATEFP00 in 2000 products, so each component is looked up from a list of
candidate names.
"""

from __future__ import annotations

from collections import Counter
from typing import NamedTuple

from .exceptions import MissingFieldError
from .fields import Field
from .reader import Dbf

UBID_LENGTH = 15

BLOCK_ID_FIELDS: dict[str, list[str]] = {
    "state": ["STATEFP10", "STATEFP00"],
    "county": ["COUNTYFP10", "COUNTYFP00"],
    "tract": ["TRACTCE10", "TRACTCE00"],
    "block": ["BLOCKCE10", "BLOCKCE00"],
}


class BlockIdFields(NamedTuple):
    state: Field
    county: Field
    tract: Field
    block: Field


class BlockIdStats(NamedTuple):
    ok: int
    short: int
    lengths: Counter[int]
    numRecords: int

    @property
    def total(self) -> int:
        return self.ok + self.short


def block_id_fields(dbf: Dbf) -> BlockIdFields:
    """Resolves the four block id components of a dbf, raising
    MissingFieldError if any of them has none of its candidate names."""
    found = {}
    missing = []
    for component, names in BLOCK_ID_FIELDS.items():
        field = dbf.bestField(names)
        if field is None:
            missing.append(component)
        else:
            found[component] = field
    if missing:
        raise MissingFieldError(
            f"missing {', '.join(missing)} field(s); fields are: "
            + " ".join(repr(f) for f in dbf.fields)
        )
    return BlockIdFields(**found)


def block_id(dbf: Dbf, fields: BlockIdFields) -> str:
    """The block id of the current record."""
    return "".join(dbf.string_value(field) for field in fields)


def block_id_stats(dbf: Dbf) -> BlockIdStats:
    """Reads the remaining records of dbf and counts how many have a full
    length block id."""
    fields = block_id_fields(dbf)
    lengths: Counter[int] = Counter()
    ok = short = 0
    while dbf.advance():
        ubid = block_id(dbf, fields)
        lengths[len(ubid)] += 1
        if len(ubid) == UBID_LENGTH:
            ok += 1
        else:
            short += 1
    return BlockIdStats(ok, short, lengths, dbf.numRecords)
