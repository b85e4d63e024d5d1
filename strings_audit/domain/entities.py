"""
Domain — 資料模型。
ResourceRecordSet 由解析器建立（核心只讀取）；FileError / AuditResult 為單次執行的檢查結果。
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Parsed Resource File
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResourceRecordSet:
    """一個 .strings 檔案的解析結果。"""

    keys: frozenset[str]
    # Declaration order; duplicates kept. Order never affects checking.
    key_values: tuple[tuple[str, str], ...]
    comments: dict[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_entries(
        cls, key_values: list[tuple[str, str]], comments: dict[str, str] | None = None
    ) -> ResourceRecordSet:
        """Build a record set from ordered (key, value) pairs."""
        return cls(
            keys=frozenset(key for key, _ in key_values),
            key_values=tuple(key_values),
            comments=dict(comments or {}),
        )

    def value_for(self, key: str) -> str | None:
        """First declared value for ``key``, or None when the key is absent."""
        for k, value in self.key_values:
            if k == key:
                return value
        return None


# ---------------------------------------------------------------------------
# Audit Outcome
# ---------------------------------------------------------------------------


@dataclass
class FileError:
    """單一檔案的失敗原因（同一路徑只會有一筆，訊息依序累加）。"""

    path: str
    messages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AuditResult:
    """整次執行的結果；errors 為空代表通過。"""

    errors: tuple[FileError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages_for(self, path: str) -> list[str]:
        for error in self.errors:
            if error.path == path:
                return list(error.messages)
        return []
