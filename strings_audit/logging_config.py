"""
strings-audit — 集中式 Logging 設定
- 輸出至 console (stderr)，讓 CI 日誌與檢查報告分開
- 設定 LOG_DIR 環境變數時，額外寫入每日輪替檔案 (TimedRotatingFileHandler)，保留 3 天
- 所有模組透過 get_logger(__name__) 取得 logger
- 設定 LOG_FORMAT=json 環境變數可切換為 JSON 結構化輸出
- 設定 LOG_LEVEL 環境變數可調整 log 等級（預設 INFO）
"""

import contextvars
import json
import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.getenv("LOG_DIR", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_FORMAT_ENV = os.getenv("LOG_FORMAT", "text").lower()

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(locale_group)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Locale-group directory currently being audited (set by audit_service per group)
locale_group_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "locale_group", default="-"
)

_root_configured = False


class _LocaleGroupFilter(logging.Filter):
    """Injects the current locale group from context into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.locale_group = locale_group_var.get()  # type: ignore[attr-defined]
        return True


class _JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON for structured log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": self.formatTime(record, LOG_DATE_FORMAT),
            "level": record.levelname,
            "locale_group": getattr(record, "locale_group", "-"),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _make_formatter() -> logging.Formatter:
    if _LOG_FORMAT_ENV == "json":
        return _JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT, datefmt=LOG_DATE_FORMAT)


def _configure_root_logger() -> None:
    """設定 root logger（僅執行一次）。"""
    global _root_configured
    if _root_configured:
        return

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)

    formatter = _make_formatter()
    locale_filter = _LocaleGroupFilter()

    # --- Console Handler ---
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(locale_filter)
    root.addHandler(console_handler)

    # --- File Handler：僅在指定 LOG_DIR 時啟用，每日輪替，保留 3 天 ---
    if LOG_DIR:
        os.makedirs(LOG_DIR, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            filename=os.path.join(LOG_DIR, "strings_audit.log"),
            when="midnight",
            interval=1,
            backupCount=3,
            encoding="utf-8",
            utc=True,
        )
        file_handler.suffix = "%Y-%m-%d"
        file_handler.setLevel(LOG_LEVEL)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(locale_filter)
        root.addHandler(file_handler)

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """取得指定名稱的 logger，自動確保 root logger 已設定。"""
    _configure_root_logger()
    return logging.getLogger(name)
