"""
Infrastructure — 語系目錄探索。
Locale group = 直接包含 `*.lproj` 子目錄、且至少一個子目錄內有資源檔的資料夾（含 root 本身）。
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from strings_audit.domain.constants import DEFAULT_STRINGS_FILENAME, LOCALE_DIR_SUFFIX
from strings_audit.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LocaleGroup:
    """一個 locale group 的 base 檔案預期路徑與其他語系目錄。"""

    directory: Path
    base_file: Path
    sibling_dirs: list[Path] = field(default_factory=list, hash=False)


def _is_locale_dir(name: str) -> bool:
    return name.endswith(LOCALE_DIR_SUFFIX)


def find_locale_groups(
    root: Path, strings_filename: str = DEFAULT_STRINGS_FILENAME
) -> list[Path]:
    """
    Sorted directories under ``root`` that directly hold `*.lproj` subdirectories,
    at least one of which contains ``strings_filename``.

    A directory whose `.lproj` children only carry storyboards, xibs or other
    resource files is not a group.
    """
    groups: list[Path] = []
    for dirpath, dirnames, _filenames in os.walk(root):
        if any(
            _is_locale_dir(d) and os.path.isfile(os.path.join(dirpath, d, strings_filename))
            for d in dirnames
        ):
            groups.append(Path(dirpath))
        # Never descend into .lproj bundles or hidden directories (.git, .build ...)
        dirnames[:] = [
            d for d in dirnames if not _is_locale_dir(d) and not d.startswith(".")
        ]
    return sorted(groups)


def describe_locale_group(
    directory: Path,
    base_lang: str,
    strings_filename: str = DEFAULT_STRINGS_FILENAME,
) -> LocaleGroup:
    """Resolve the base file path and sibling locale directories for one group."""
    base_dir_name = f"{base_lang}{LOCALE_DIR_SUFFIX}"
    siblings = sorted(
        child
        for child in directory.iterdir()
        if child.is_dir() and _is_locale_dir(child.name) and child.name != base_dir_name
    )
    return LocaleGroup(
        directory=directory,
        base_file=directory / base_dir_name / strings_filename,
        sibling_dirs=siblings,
    )
