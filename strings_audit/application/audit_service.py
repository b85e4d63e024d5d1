"""
Application — Audit Service：整個專案的多語系一致性檢查。

主要工作流程：
1. 探索所有 locale group（直接包含 *.lproj、且其中有資源檔的目錄）
2. 每個 group 解析 base 檔案一次；找不到或無法解析時，記錄於 base 路徑並跳過此 group
3. base 檔案的單獨 '%' 檢查每個 group 只做一次，記錄於 base 路徑
4. 逐一解析其他語系檔案並交給 pair_auditor；解析失敗只影響該檔案
5. 依探索順序將各 group 結果併入 ReportAggregator，回傳 AuditResult

workers > 1 時各 group 於 ThreadPoolExecutor 平行執行；合併順序固定，報告與循序執行相同。
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from strings_audit.application.pair_auditor import audit, check_stray_percent
from strings_audit.application.report import ReportAggregator
from strings_audit.domain.constants import DEFAULT_STRINGS_FILENAME, DEFAULT_WORKERS
from strings_audit.domain.entities import AuditResult
from strings_audit.domain.enums import AuditPhase, ErrorKind, error_message
from strings_audit.domain.protocols import (
    LocaleGroupFinder,
    StringsParseError,
    StringsParser,
)
from strings_audit.infrastructure.locale_discovery import (
    describe_locale_group,
    find_locale_groups,
)
from strings_audit.infrastructure.strings_parser import parse_strings_file
from strings_audit.logging_config import get_logger, locale_group_var

logger = get_logger(__name__)

Finding = tuple[str, str]  # (file path, failure message)


def audit_locale_group(
    directory: Path,
    base_lang: str,
    strings_filename: str = DEFAULT_STRINGS_FILENAME,
    parse: StringsParser = parse_strings_file,
) -> list[Finding]:
    """
    Audit every sibling locale of one locale group against its base file.

    Never raises for missing or malformed files: each becomes a finding
    against the offending path.
    """
    token = locale_group_var.set(str(directory))
    try:
        logger.info("🔄 Language directory: %s", directory)
        group = describe_locale_group(directory, base_lang, strings_filename)
        base_path = str(group.base_file)

        if not group.base_file.is_file():
            logger.error("  找不到 base 語系檔案：%s", base_path)
            return [(base_path, error_message(ErrorKind.BASE_FILE_MISSING))]

        try:
            base = parse(group.base_file)
        except StringsParseError as e:
            logger.error("  base 語系檔案解析失敗：%s", e)
            return [
                (base_path, error_message(ErrorKind.BASE_FILE_UNPARSABLE, reason=e.reason))
            ]

        findings: list[Finding] = []
        logger.info("  Checking base file: %s", base_path)
        if not check_stray_percent(base, base_path):
            findings.append((base_path, error_message(ErrorKind.BASE_STRAY_PERCENT)))

        for sibling_dir in group.sibling_dirs:
            other_path = sibling_dir / strings_filename
            if not other_path.is_file():
                logger.warning("  %s 沒有 %s，略過", sibling_dir, strings_filename)
                continue

            try:
                other = parse(other_path)
            except StringsParseError as e:
                logger.error("  語系檔案解析失敗：%s", e)
                findings.append(
                    (str(other_path), error_message(ErrorKind.PARSE_FAILURE, reason=e.reason))
                )
                continue

            logger.info("  Checking other file: %s, keys count: %d", other_path, len(other.keys))
            findings.extend(
                (str(other_path), message) for message in audit(base, other, str(other_path))
            )
        return findings
    finally:
        locale_group_var.reset(token)


def run_audit(
    root_dir: str | Path,
    base_lang: str,
    *,
    strings_filename: str = DEFAULT_STRINGS_FILENAME,
    workers: int = DEFAULT_WORKERS,
    parse: StringsParser = parse_strings_file,
    find_groups: LocaleGroupFinder = find_locale_groups,
) -> AuditResult:
    """
    Audit all locale groups under ``root_dir`` against ``base_lang``.

    Returns:
        AuditResult; empty errors means every file passed.
    """
    logger.debug("Phase: %s", AuditPhase.IDLE)
    aggregator = ReportAggregator()

    logger.debug("Phase: %s", AuditPhase.SCANNING)
    groups = find_groups(Path(root_dir), strings_filename)
    logger.info("Target lang directories count: %d", len(groups))
    if not groups:
        logger.warning("在 %s 底下找不到任何含 %s 的 *.lproj 目錄", root_dir, strings_filename)

    logger.debug("Phase: %s", AuditPhase.AUDITING)
    if workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(audit_locale_group, d, base_lang, strings_filename, parse)
                for d in groups
            ]
            per_group = [future.result() for future in futures]
    else:
        per_group = [
            audit_locale_group(d, base_lang, strings_filename, parse) for d in groups
        ]

    logger.debug("Phase: %s", AuditPhase.REPORTING)
    for findings in per_group:
        aggregator.record_all(findings)
    result = aggregator.finalize()

    logger.debug("Phase: %s", AuditPhase.DONE)
    logger.info(
        "檢查完成：%d 個 group，%d 個檔案有錯誤", len(groups), len(result.errors)
    )
    return result
