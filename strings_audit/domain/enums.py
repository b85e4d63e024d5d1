"""
Domain — 列舉定義。
檢查結果的失敗分類與佔位符語法分類。
"""

from enum import StrEnum

from strings_audit.domain.constants import (
    MSG_BASE_FILE_MISSING,
    MSG_BASE_FILE_UNPARSABLE,
    MSG_BASE_STRAY_PERCENT,
    MSG_COMMENT_MISMATCH,
    MSG_KEY_MISMATCH,
    MSG_PARSE_FAILURE,
    MSG_PLACEHOLDER_MISMATCH,
    MSG_STRAY_PERCENT,
)


class ErrorKind(StrEnum):
    """失敗分類：目錄層級 / 檔案解析 / 內容比對"""

    BASE_FILE_MISSING = "BaseFileMissing"
    BASE_FILE_UNPARSABLE = "BaseFileUnparsable"
    PARSE_FAILURE = "ParseFailure"
    KEY_MISMATCH = "KeyMismatch"
    COMMENT_MISMATCH = "CommentMismatch"
    PLACEHOLDER_MISMATCH = "PlaceholderMismatch"
    STRAY_PERCENT = "StrayPercent"
    BASE_STRAY_PERCENT = "BaseStrayPercent"


class PlaceholderKind(StrEnum):
    """佔位符語法分類"""

    LITERAL_ESCAPE = "literal_escape"  # %% and the two-character \n
    BARE_SPECIFIER = "bare_specifier"  # %s %d %@
    POSITIONAL_SPECIFIER = "positional_specifier"  # %<n>$s %<n>$d %<n>$@


class AuditPhase(StrEnum):
    """單次執行的階段：Idle → Scanning → Auditing → Reporting → Done"""

    IDLE = "Idle"
    SCANNING = "Scanning"
    AUDITING = "Auditing"
    REPORTING = "Reporting"
    DONE = "Done"


# ErrorKind → one-line report message (some take a {reason} argument)
ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.BASE_FILE_MISSING: MSG_BASE_FILE_MISSING,
    ErrorKind.BASE_FILE_UNPARSABLE: MSG_BASE_FILE_UNPARSABLE,
    ErrorKind.PARSE_FAILURE: MSG_PARSE_FAILURE,
    ErrorKind.KEY_MISMATCH: MSG_KEY_MISMATCH,
    ErrorKind.COMMENT_MISMATCH: MSG_COMMENT_MISMATCH,
    ErrorKind.PLACEHOLDER_MISMATCH: MSG_PLACEHOLDER_MISMATCH,
    ErrorKind.STRAY_PERCENT: MSG_STRAY_PERCENT,
    ErrorKind.BASE_STRAY_PERCENT: MSG_BASE_STRAY_PERCENT,
}


def error_message(kind: ErrorKind, **kwargs: str) -> str:
    """Render the report line for a failure kind."""
    template = ERROR_MESSAGES[kind]
    return template.format(**kwargs) if kwargs else template
