"""Pair kerning lookup from GPOS and legacy kern tables.

GPOS pair adjustments registered under the 'kern' feature take precedence;
fonts without them fall back to the first entries of the legacy 'kern'
table. Values are horizontal advance adjustments in design units.
"""

from typing import Any

from fontTools.ttLib import TTFont

_PAIR_ADJUSTMENT = 2
_EXTENSION = 9


class PairKerning:
    """Kerning value lookup by glyph name pair, with memoization."""

    def __init__(self, font: TTFont) -> None:
        self._subtables = _gpos_pair_subtables(font)
        self._legacy = {} if self._subtables else _legacy_kern_pairs(font)
        self._cache: dict[tuple[str, str], int] = {}

    def __bool__(self) -> bool:
        return bool(self._subtables or self._legacy)

    def value(self, left: str, right: str) -> int:
        """Kerning between two glyph names (0 if the pair is not kerned)."""
        key = (left, right)
        if key not in self._cache:
            self._cache[key] = self._lookup(left, right)
        return self._cache[key]

    def _lookup(self, left: str, right: str) -> int:
        if not self._subtables:
            return self._legacy.get((left, right), 0)
        for subtable in self._subtables:
            adjustment = _pair_adjustment(subtable, left, right)
            if adjustment is not None:
                return adjustment
        return 0


def _gpos_pair_subtables(font: TTFont) -> list[Any]:
    """Collect PairPos subtables reachable from the 'kern' feature, in lookup order."""
    if "GPOS" not in font:
        return []
    table = font["GPOS"].table
    if table.FeatureList is None or table.LookupList is None:
        return []

    lookup_indices: set[int] = set()
    for record in table.FeatureList.FeatureRecord:
        if record.FeatureTag == "kern":
            lookup_indices.update(record.Feature.LookupListIndex)

    subtables = []
    for index in sorted(lookup_indices):
        lookup = table.LookupList.Lookup[index]
        for subtable in lookup.SubTable:
            if lookup.LookupType == _EXTENSION:
                if subtable.ExtensionLookupType != _PAIR_ADJUSTMENT:
                    continue
                subtable = subtable.ExtSubTable
            elif lookup.LookupType != _PAIR_ADJUSTMENT:
                continue
            subtables.append(subtable)
    return subtables


def _pair_adjustment(subtable: Any, left: str, right: str) -> int | None:
    """Adjustment of one PairPos subtable, None when it does not cover the pair."""
    coverage = subtable.Coverage.glyphs
    if left not in coverage:
        return None

    if subtable.Format == 1:
        pair_set = subtable.PairSet[coverage.index(left)]
        for record in pair_set.PairValueRecord:
            if record.SecondGlyph == right:
                return _x_advance(record.Value1)
        return None

    if subtable.Format == 2:
        class1 = subtable.ClassDef1.classDefs.get(left, 0) if subtable.ClassDef1 else 0
        class2 = subtable.ClassDef2.classDefs.get(right, 0) if subtable.ClassDef2 else 0
        record = subtable.Class1Record[class1].Class2Record[class2]
        return _x_advance(record.Value1)

    return None


def _x_advance(value: Any) -> int:
    return int(getattr(value, "XAdvance", 0) or 0) if value is not None else 0


def _legacy_kern_pairs(font: TTFont) -> dict[tuple[str, str], int]:
    """Flatten the legacy kern table; earlier subtables win."""
    if "kern" not in font:
        return {}
    pairs: dict[tuple[str, str], int] = {}
    for subtable in font["kern"].kernTables:
        for pair, value in (getattr(subtable, "kernTable", None) or {}).items():
            pairs.setdefault(pair, value)
    return pairs
