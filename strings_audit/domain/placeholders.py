"""
Domain — 佔位符詞彙與掃描。
純函式，無副作用。詞彙表以三種語法分類（literal escape / bare / positional）組成，
於模組載入時編譯為單一 alternation matcher 後重複使用。
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from strings_audit.domain.constants import (
    CONVERSION_SUFFIXES,
    LITERAL_ESCAPE_TOKENS,
    MAX_POSITIONAL_INDEX,
    STRAY_PERCENT_ALLOWED_FOLLOWERS,
)
from strings_audit.domain.enums import PlaceholderKind

# ---------------------------------------------------------------------------
# Vocabulary (tagged grammar)
# ---------------------------------------------------------------------------


def literal_escapes() -> frozenset[str]:
    return frozenset(LITERAL_ESCAPE_TOKENS)


def bare_specifiers() -> frozenset[str]:
    return frozenset(f"%{suffix}" for suffix in CONVERSION_SUFFIXES)


def positional_specifiers(max_index: int = MAX_POSITIONAL_INDEX) -> frozenset[str]:
    return frozenset(
        f"%{n}${suffix}"
        for suffix in CONVERSION_SUFFIXES
        for n in range(1, max_index + 1)
    )


PLACEHOLDER_GRAMMAR: dict[PlaceholderKind, frozenset[str]] = {
    PlaceholderKind.LITERAL_ESCAPE: literal_escapes(),
    PlaceholderKind.BARE_SPECIFIER: bare_specifiers(),
    PlaceholderKind.POSITIONAL_SPECIFIER: positional_specifiers(),
}

PLACEHOLDERS: frozenset[str] = frozenset().union(*PLACEHOLDER_GRAMMAR.values())

# Longest tokens first so "%10$s" is never shadowed by a shorter alternative.
_PLACEHOLDER_PATTERN = re.compile(
    "|".join(
        re.escape(token) for token in sorted(PLACEHOLDERS, key=lambda t: (-len(t), t))
    )
)

# A '%' is legitimate when it is the second half of "%%", or when it starts
# "%%", a one-letter conversion, or "<digits>$<conversion>".
_FOLLOWER_CLASS = f"[{re.escape(STRAY_PERCENT_ALLOWED_FOLLOWERS)}]"
_POSITIONAL_TAIL = r"[0-9]+\$[@dsf]"
STRAY_PERCENT_PATTERN = re.compile(
    rf"(?<!%)%(?!{_FOLLOWER_CLASS}|{_POSITIONAL_TAIL})"
)


def classify(token: str) -> PlaceholderKind | None:
    """Return the grammar class of a vocabulary token, or None if unrecognised."""
    for kind, tokens in PLACEHOLDER_GRAMMAR.items():
        if token in tokens:
            return kind
    return None


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


def scan_ordered(value: str) -> list[str]:
    """Recognised placeholders in ``value``, deduplicated, in first-seen order."""
    return list(dict.fromkeys(_PLACEHOLDER_PATTERN.findall(value)))


def scan(value: str) -> set[str]:
    """Set of recognised placeholder tokens occurring in ``value``."""
    return set(scan_ordered(value))


def has_stray_percent(value: str) -> bool:
    """
    True when any '%' in ``value`` is not part of a legitimate placeholder.

    A lone trailing '%' is stray (the lookahead finds no valid suffix).
    """
    return STRAY_PERCENT_PATTERN.search(value) is not None


def keys_with_stray_percent(key_values: Iterable[tuple[str, str]]) -> list[str]:
    """Keys whose value contains a stray '%', in declaration order."""
    return [key for key, value in key_values if has_stray_percent(value)]
