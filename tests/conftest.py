"""
Shared test fixtures — temporary .lproj trees written under tmp_path.
"""

import os
import tempfile

# Set environment variables BEFORE any package imports so log files land in a temp dir
os.environ.setdefault(
    "LOG_DIR", os.path.join(tempfile.gettempdir(), "strings_audit_test_logs")
)

from collections.abc import Callable  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402

# ---------------------------------------------------------------------------
# .strings rendering
# ---------------------------------------------------------------------------

Entry = tuple[str, str] | tuple[str, str, str]


def render_strings(entries: list[Entry]) -> str:
    """Render (key, value[, comment]) tuples as .strings source."""
    lines: list[str] = []
    for entry in entries:
        key, value = entry[0], entry[1]
        if len(entry) == 3 and entry[2]:
            lines.append(f"/* {entry[2]} */")
        lines.append(f'"{key}" = "{value}";')
        lines.append("")
    return "\n".join(lines)


@pytest.fixture()
def write_strings(tmp_path: Path) -> Callable[..., Path]:
    """
    Write ``<tmp_path>/<group>/<lang>.lproj/Localizable.strings``.

    Usage: write_strings("App/Languages", "ja", [("a", "Hi %s", "greeting")])
    """

    def _write(
        group: str,
        lang: str,
        entries: list[Entry],
        filename: str = "Localizable.strings",
    ) -> Path:
        lproj = tmp_path / group / f"{lang}.lproj"
        lproj.mkdir(parents=True, exist_ok=True)
        path = lproj / filename
        path.write_text(render_strings(entries), encoding="utf-8")
        return path

    return _write
