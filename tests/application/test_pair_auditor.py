"""Tests for application/pair_auditor.py — one (base, other-locale) file pair."""

import logging

from strings_audit.application.pair_auditor import audit, check_stray_percent
from strings_audit.domain.constants import (
    MSG_COMMENT_MISMATCH,
    MSG_KEY_MISMATCH,
    MSG_PLACEHOLDER_MISMATCH,
    MSG_STRAY_PERCENT,
)
from strings_audit.domain.entities import ResourceRecordSet

PATH = "/project/App/Languages/en.lproj/Localizable.strings"


def _records(key_values, comments=None) -> ResourceRecordSet:
    return ResourceRecordSet.from_entries(key_values, comments)


class TestAudit:
    def test_consistent_pair_has_no_failures(self):
        base = _records([("a", "Hi %s"), ("b", "ok")], {"a": "greeting", "b": ""})
        other = _records([("a", "Hello %s"), ("b", "fine")], {"a": "greeting", "b": ""})
        assert audit(base, other, PATH) == []

    def test_every_category_reported_once_in_check_order(self):
        base = _records([("a", "Hi %s"), ("b", "ok")], {"a": "greeting", "b": ""})
        other = _records([("a", "Hi"), ("c", "50%")], {"a": "salutation", "c": ""})

        failures = audit(base, other, PATH)

        assert failures == [
            MSG_KEY_MISMATCH,
            MSG_COMMENT_MISMATCH,
            MSG_PLACEHOLDER_MISMATCH,
            MSG_STRAY_PERCENT,
        ]

    def test_key_mismatch_only(self):
        base = _records([("a", "Hi %s"), ("b", "ok")])
        other = _records([("a", "Hi %s")])
        assert audit(base, other, PATH) == [MSG_KEY_MISMATCH]

    def test_many_stray_keys_still_one_message(self):
        base = _records([("a", "x"), ("b", "y")])
        other = _records([("a", "10%"), ("b", "20%")])
        assert audit(base, other, PATH) == [MSG_STRAY_PERCENT]

    def test_base_stray_percent_is_not_reported_against_other(self):
        base = _records([("a", "50%")])
        other = _records([("a", "50%%")])
        assert audit(base, other, PATH) == []

    def test_missing_keys_are_logged(self, caplog):
        base = _records([("a", "1"), ("b", "2")])
        other = _records([("a", "1")])
        with caplog.at_level(logging.WARNING):
            audit(base, other, PATH)
        assert "key：b" in caplog.text
        assert PATH in caplog.text


class TestCheckStrayPercent:
    def test_clean_values(self):
        records = _records(
            [
                ("key1", "This is a test string with %% and %s"),
                ("key2", "Another string with %1$s and %2$d"),
            ]
        )
        assert check_stray_percent(records, PATH) is True

    def test_offending_key_is_logged(self, caplog):
        records = _records(
            [
                ("key1", "This string has a single % character"),
                ("key2", "Another string with %1$s and %2$d"),
            ]
        )
        with caplog.at_level(logging.WARNING):
            assert check_stray_percent(records, PATH) is False
        assert "'key1'" in caplog.text
        assert "'key2'" not in caplog.text
