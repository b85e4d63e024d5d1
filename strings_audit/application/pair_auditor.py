"""
Application — Locale-Pair Auditor：單一 (base, 其他語系) 檔案組的檢查。

檢查順序：
1. key 集合一致
2. 註解一致（任一側為空的 key 不比對）
3. base 值中的佔位符皆出現在其他語系值中
4. 其他語系值中沒有多餘的 '%'（base 檔案由 audit_service 每個 group 檢查一次）

每項失敗只回傳一行分類訊息；個別差異寫入 log 供人工檢視。
"""

from strings_audit.domain.consistency import (
    comments_equal,
    keys_equal,
    placeholders_consistent,
)
from strings_audit.domain.entities import ResourceRecordSet
from strings_audit.domain.enums import ErrorKind, error_message
from strings_audit.domain.placeholders import keys_with_stray_percent
from strings_audit.logging_config import get_logger

logger = get_logger(__name__)


def check_keys(base: ResourceRecordSet, other: ResourceRecordSet, path: str) -> bool:
    comparison = keys_equal(base.keys, other.keys)
    logger.info("    Key 一致：%s", comparison.equal)
    if not comparison.equal:
        for key in comparison.missing:
            logger.warning("      🚨 %s 缺少 base 的 key：%s", path, key)
        for key in comparison.extra:
            logger.warning("      🚨 %s 多出 base 沒有的 key：%s", path, key)
    return comparison.equal


def check_comments(base: ResourceRecordSet, other: ResourceRecordSet, path: str) -> bool:
    comparison = comments_equal(base.comments, other.comments)
    logger.info("    註解一致：%s", comparison.equal)
    if not comparison.equal:
        for key in comparison.missing:
            logger.warning(
                "      🚨 %s 的 '%s' 註解與 base 不同（base：%r）",
                path,
                key,
                base.comments.get(key, ""),
            )
        for key in comparison.extra:
            logger.warning(
                "      🚨 %s 的 '%s' 註解只存在於此檔（%r）",
                path,
                key,
                other.comments.get(key, ""),
            )
    return comparison.equal


def check_placeholders(
    base: ResourceRecordSet, other: ResourceRecordSet, path: str
) -> bool:
    comparison = placeholders_consistent(base, other)
    logger.info("    佔位符一致：%s", comparison.consistent)
    for key, missing in comparison.diffs:
        logger.warning("      🚨 %s 的 '%s' 缺少佔位符 %s", path, key, missing)
    return comparison.consistent


def check_stray_percent(records: ResourceRecordSet, path: str) -> bool:
    """True when no value in ``records`` contains a stray '%'."""
    offending = keys_with_stray_percent(records.key_values)
    for key in offending:
        logger.warning("      🚨 %s 的 '%s' 含有單獨的 %% 字元", path, key)
    return not offending


def audit(base: ResourceRecordSet, other: ResourceRecordSet, path: str) -> list[str]:
    """
    Audit one other-locale file against the base file.

    Returns:
        One failure message per failing check, in check order; empty when the pair is consistent.
    """
    failures: list[str] = []
    if not check_keys(base, other, path):
        failures.append(error_message(ErrorKind.KEY_MISMATCH))
    if not check_comments(base, other, path):
        failures.append(error_message(ErrorKind.COMMENT_MISMATCH))
    if not check_placeholders(base, other, path):
        failures.append(error_message(ErrorKind.PLACEHOLDER_MISMATCH))
    if not check_stray_percent(other, path):
        failures.append(error_message(ErrorKind.STRAY_PERCENT))
    return failures
