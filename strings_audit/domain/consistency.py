"""
Domain — 跨語系一致性比對。
純函式，無副作用：key 集合、註解、佔位符三種比對，皆回傳結果與可供診斷的差異清單。
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from strings_audit.domain.entities import ResourceRecordSet
from strings_audit.domain.placeholders import scan_ordered

# ---------------------------------------------------------------------------
# Data Structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SetComparison:
    """集合比對結果。missing = 僅在 base；extra = 僅在 other（皆已排序）。"""

    equal: bool
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PlaceholderComparison:
    """佔位符比對結果：diffs 依 base 宣告順序列出 (key, 缺少的佔位符)。"""

    consistent: bool
    diffs: list[tuple[str, list[str]]] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Set Equivalence
# ---------------------------------------------------------------------------


def keys_equal(base: Iterable[str], other: Iterable[str]) -> SetComparison:
    """Case-sensitive set equality of two key collections; order never matters."""
    base_set, other_set = set(base), set(other)
    if base_set == other_set:
        return SetComparison(equal=True)
    return SetComparison(
        equal=False,
        missing=sorted(base_set - other_set),
        extra=sorted(other_set - base_set),
    )


def comments_equal(base: Mapping[str, str], other: Mapping[str, str]) -> SetComparison:
    """
    Compare (key, comment) pairs of two files.

    A key whose comment is empty or absent on either side is excluded from
    both sides first: a missing comment is not a discrepancy. Remaining
    differences are reported in both directions by key.
    """
    comparable = {
        key
        for key in set(base) | set(other)
        if base.get(key) and other.get(key)
    }
    base_pairs = {(key, base[key]) for key in comparable}
    other_pairs = {(key, other[key]) for key in comparable}
    if base_pairs == other_pairs:
        return SetComparison(equal=True)
    return SetComparison(
        equal=False,
        missing=sorted({key for key, _ in base_pairs - other_pairs}),
        extra=sorted({key for key, _ in other_pairs - base_pairs}),
    )


# ---------------------------------------------------------------------------
# Placeholder Consistency
# ---------------------------------------------------------------------------


def placeholders_consistent(
    base: ResourceRecordSet, other: ResourceRecordSet
) -> PlaceholderComparison:
    """
    Every placeholder used by a base value must appear in the other locale's value.

    A key absent from ``other`` counts as an empty value here; key absence
    itself is reported by keys_equal.
    """
    diffs: list[tuple[str, list[str]]] = []
    for key, value in base.key_values:
        tokens = scan_ordered(value)
        if not tokens:
            continue
        other_value = other.value_for(key) or ""
        missing = [token for token in tokens if token not in other_value]
        if missing:
            diffs.append((key, missing))
    return PlaceholderComparison(consistent=not diffs, diffs=diffs)
