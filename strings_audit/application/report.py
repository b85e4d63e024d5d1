"""
Application — Report Aggregator：依檔案路徑彙整失敗訊息。
同一路徑只建立一筆 FileError（first-seen 順序），訊息只增不減。
"""

import threading
from collections.abc import Iterable

from strings_audit.domain.entities import AuditResult, FileError


class ReportAggregator:
    """Ordered path → FileError accumulator, safe to share between worker threads."""

    def __init__(self) -> None:
        self._errors: dict[str, FileError] = {}
        self._lock = threading.Lock()

    def record_failure(self, path: str, message: str) -> None:
        """Find-or-create the FileError for ``path`` and append ``message``."""
        with self._lock:
            error = self._errors.get(path)
            if error is None:
                error = self._errors[path] = FileError(path=path)
            error.messages.append(message)

    def record_all(self, findings: Iterable[tuple[str, str]]) -> None:
        for path, message in findings:
            self.record_failure(path, message)

    def finalize(self) -> AuditResult:
        with self._lock:
            return AuditResult(
                errors=tuple(
                    FileError(path=e.path, messages=list(e.messages))
                    for e in self._errors.values()
                )
            )
