"""Tests for domain/placeholders.py — vocabulary, scanner, stray '%' detection."""

import pytest

from strings_audit.domain.enums import PlaceholderKind
from strings_audit.domain.placeholders import (
    PLACEHOLDER_GRAMMAR,
    PLACEHOLDERS,
    classify,
    has_stray_percent,
    keys_with_stray_percent,
    scan,
    scan_ordered,
)

# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------


class TestVocabulary:
    def test_contains_literal_and_bare_tokens(self):
        for token in ("%%", "\\n", "%s", "%d", "%@"):
            assert token in PLACEHOLDERS

    def test_contains_every_positional_token_up_to_twenty(self):
        for suffix in ("s", "d", "@"):
            for n in range(1, 21):
                assert f"%{n}${suffix}" in PLACEHOLDERS

    def test_total_size(self):
        # 2 literal escapes + 3 bare + 3 * 20 positional
        assert len(PLACEHOLDERS) == 65

    @pytest.mark.parametrize("token", ["%", "%21$s", "%21$d", "%21$@", "%f", "\n"])
    def test_excludes_unrecognised_tokens(self, token):
        assert token not in PLACEHOLDERS

    def test_grammar_classes_are_disjoint(self):
        literal = PLACEHOLDER_GRAMMAR[PlaceholderKind.LITERAL_ESCAPE]
        bare = PLACEHOLDER_GRAMMAR[PlaceholderKind.BARE_SPECIFIER]
        positional = PLACEHOLDER_GRAMMAR[PlaceholderKind.POSITIONAL_SPECIFIER]
        assert not literal & bare
        assert not bare & positional
        assert not literal & positional

    @pytest.mark.parametrize(
        "token,kind",
        [
            ("%%", PlaceholderKind.LITERAL_ESCAPE),
            ("\\n", PlaceholderKind.LITERAL_ESCAPE),
            ("%@", PlaceholderKind.BARE_SPECIFIER),
            ("%20$d", PlaceholderKind.POSITIONAL_SPECIFIER),
            ("%21$d", None),
        ],
    )
    def test_classify(self, token, kind):
        assert classify(token) == kind


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------


class TestScan:
    def test_positional_tokens(self):
        assert scan("%1$s and %2$d") == {"%1$s", "%2$d"}

    def test_no_placeholders(self):
        assert scan("no placeholders") == set()

    def test_two_digit_index_is_not_shadowed(self):
        assert scan("%10$s") == {"%10$s"}

    def test_duplicates_collapsed(self):
        assert scan("a %s b %s") == {"%s"}

    def test_escaped_newline_is_two_characters(self):
        assert scan(r"line1\nline2") == {"\\n"}
        assert scan("line1\nline2") == set()

    def test_percent_escape(self):
        assert scan("100%% sure") == {"%%"}

    def test_index_above_vocabulary_is_ignored(self):
        assert scan("%21$s") == set()

    def test_scan_ordered_keeps_first_seen_order(self):
        assert scan_ordered("%d then %@ then %d") == ["%d", "%@"]


# ---------------------------------------------------------------------------
# has_stray_percent
# ---------------------------------------------------------------------------


class TestHasStrayPercent:
    @pytest.mark.parametrize(
        "value",
        [
            "%%",
            "100%% done",
            "a %% b %% c",
            "This is a test string with %% and %s",
            "Another string with %1$s and %2$d",
            "%@ liked your post",
        ],
    )
    def test_legitimate_percent_usage(self, value):
        assert has_stray_percent(value) is False

    @pytest.mark.parametrize(
        "value",
        ["50%", "%", "This string has a single % character", "%x", "%1s", "%.2f"],
    )
    def test_stray_percent_detected(self, value):
        assert has_stray_percent(value) is True

    def test_float_conversion_is_allowed(self):
        assert has_stray_percent("%f km") is False
        assert has_stray_percent("%3$f km") is False

    def test_positional_above_vocabulary_is_not_stray(self):
        # Not a recognised placeholder either; classified by the heuristic only.
        assert has_stray_percent("%21$s") is False

    def test_multiple_stray_percents_yield_single_result(self):
        assert has_stray_percent("10% to 20%") is True

    def test_plain_text(self):
        assert has_stray_percent("no percent at all") is False


class TestKeysWithStrayPercent:
    def test_reports_owning_keys_in_declaration_order(self):
        key_values = [("key1", "50%"), ("key2", "ok %s"), ("key3", "%")]
        assert keys_with_stray_percent(key_values) == ["key1", "key3"]

    def test_no_offending_keys(self):
        key_values = [
            ("key1", "This is a test string with %% and %s"),
            ("key2", "Another string with %1$s and %2$d"),
        ]
        assert keys_with_stray_percent(key_values) == []
