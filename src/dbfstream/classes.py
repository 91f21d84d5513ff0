from __future__ import annotations

from typing import Iterable

from .types import RecordValue


class Record(list[RecordValue]):
    """
    The trimmed string values of one dbf record, in field order. Values can
    also be looked up by field name, as a key or as an attribute; when
    several fields share a name the first one wins, as in Dbf.field().

    >>> r = Record({'ID': 0}, ['7'], oid=0)
    >>> r[0], r['ID'], r.ID
    ('7', '7', '7')
    """

    def __init__(
        self,
        field_positions: dict[str, int],
        values: Iterable[RecordValue],
        oid: int = -1,
    ):
        self._positions = field_positions
        self.oid = oid
        list.__init__(self, values)

    def __getattr__(self, item: str) -> RecordValue:
        # only reached for names that are not real attributes
        positions = self.__dict__.get("_positions", {})
        if item not in positions:
            raise AttributeError(f"{item} is not a field name")
        return list.__getitem__(self, positions[item])

    def __getitem__(self, item):  # type: ignore[override]
        if isinstance(item, str):
            if item not in self._positions:
                raise KeyError(f"{item} is not a field name")
            item = self._positions[item]
        return list.__getitem__(self, item)

    def as_dict(self) -> dict[str, RecordValue]:
        """Returns the record as a dict keyed by field name."""
        return {name: self[i] for name, i in self._positions.items()}

    def __repr__(self) -> str:
        return f"Record #{self.oid}: {list(self)}"
