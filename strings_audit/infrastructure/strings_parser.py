"""
Infrastructure — Apple .strings 解析器。

支援：
- `/* ... */` 與 `// ...` 註解（緊鄰 entry 上方的註解歸屬該 key）
- `"key" = "value";` 與未加引號的 key（英數、`_ . - /`）
- 值內的跳脫序列原樣保留（`\\n` 仍為兩個字元，供佔位符比對）
- UTF-8 與帶 BOM 的 UTF-16 編碼
"""

from __future__ import annotations

import codecs
import re
from pathlib import Path

from strings_audit.domain.entities import ResourceRecordSet
from strings_audit.domain.protocols import StringsParseError
from strings_audit.logging_config import get_logger

logger = get_logger(__name__)

_BARE_KEY_RE = re.compile(r"[A-Za-z0-9_.\-/]+")
_COMMENT_MARKER_RE = re.compile(r"^\s*\*\s?", re.MULTILINE)


def decode_strings_bytes(raw: bytes, path: str | Path) -> str:
    """Decode file bytes: UTF-16 when a BOM says so, UTF-8 otherwise."""
    try:
        if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            return raw.decode("utf-16")
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise StringsParseError(path, f"cannot decode file ({e.reason})") from e


class _Scanner:
    """Cursor over .strings text; tracks line numbers for error messages."""

    def __init__(self, text: str, path: str):
        self.text = text
        self.path = path
        self.pos = 0

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.pos) + 1

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, size: int = 1) -> str:
        return self.text[self.pos : self.pos + size]

    def fail(self, reason: str) -> StringsParseError:
        return StringsParseError(self.path, reason, line=self.line)

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.text[self.pos].isspace():
            self.pos += 1

    def read_comment(self) -> str | None:
        """Consume one comment if present and return its text without markers."""
        if self.peek(2) == "/*":
            end = self.text.find("*/", self.pos + 2)
            if end == -1:
                raise self.fail("unterminated block comment")
            body = self.text[self.pos + 2 : end]
            self.pos = end + 2
            return _COMMENT_MARKER_RE.sub("", body).strip()
        if self.peek(2) == "//":
            end = self.text.find("\n", self.pos)
            end = len(self.text) if end == -1 else end
            body = self.text[self.pos + 2 : end]
            self.pos = end
            return body.strip()
        return None

    def read_quoted(self) -> str:
        """Consume a quoted string; escapes are kept verbatim."""
        start_line = self.line
        self.pos += 1  # opening quote
        chunks: list[str] = []
        while not self.at_end():
            ch = self.text[self.pos]
            if ch == "\\":
                chunks.append(self.text[self.pos : self.pos + 2])
                self.pos += 2
                continue
            if ch == '"':
                self.pos += 1
                return "".join(chunks)
            chunks.append(ch)
            self.pos += 1
        raise StringsParseError(self.path, "unterminated string literal", line=start_line)

    def read_token(self) -> str:
        if self.peek() == '"':
            return self.read_quoted()
        m = _BARE_KEY_RE.match(self.text, self.pos)
        if not m:
            raise self.fail(f"unexpected character {self.peek()!r}")
        self.pos = m.end()
        return m.group(0)

    def expect(self, char: str) -> None:
        self.skip_whitespace()
        if self.peek() != char:
            found = self.peek() or "end of file"
            raise self.fail(f"expected {char!r}, found {found!r}")
        self.pos += 1


def parse_strings_text(text: str, path: str | Path = "<memory>") -> ResourceRecordSet:
    """Parse .strings source text into a ResourceRecordSet."""
    scanner = _Scanner(text, str(path))
    key_values: list[tuple[str, str]] = []
    comments: dict[str, str] = {}
    pending_comment = ""
    entry_end: int | None = None  # position just after the previous entry's ';'

    while True:
        scanner.skip_whitespace()
        if scanner.at_end():
            break

        comment_start = scanner.pos
        comment = scanner.read_comment()
        if comment is not None:
            # A comment on the same line as the previous entry trails that entry
            trailing = entry_end is not None and "\n" not in text[entry_end:comment_start]
            if not trailing:
                pending_comment = comment
            continue

        key = scanner.read_token()
        scanner.expect("=")
        scanner.skip_whitespace()
        value = scanner.read_token()
        scanner.expect(";")

        key_values.append((key, value))
        comments[key] = pending_comment
        pending_comment = ""
        entry_end = scanner.pos

    return ResourceRecordSet.from_entries(key_values, comments)


def parse_strings_file(path: Path) -> ResourceRecordSet:
    """
    Read and parse one .strings file.

    Raises:
        StringsParseError: file unreadable, undecodable or malformed.
    """
    try:
        raw = Path(path).read_bytes()
    except OSError as e:
        raise StringsParseError(path, e.strerror or str(e)) from e

    records = parse_strings_text(decode_strings_bytes(raw, path), path)
    logger.debug("已解析 %s：%d 個 key", path, len(records.keys))
    return records
