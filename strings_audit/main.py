"""
strings-audit — CLI 進入點。
檢查每個 locale group 內，其他語系的 .strings 檔案是否與 base 語系一致。

使用方式：
    strings-audit <project root path> <base language code>
    python -m strings_audit ./App ja

Exit code：0 = 全部通過；1 = 有錯誤或參數無效。
"""

import sys

from dotenv import load_dotenv

# Load .env before logging_config reads LOG_LEVEL / LOG_FORMAT / LOG_DIR
load_dotenv()

from pydantic import ValidationError  # noqa: E402

from strings_audit.application.audit_service import run_audit  # noqa: E402
from strings_audit.application.formatters import format_report  # noqa: E402
from strings_audit.config.settings import load_settings  # noqa: E402
from strings_audit.logging_config import get_logger  # noqa: E402

logger = get_logger(__name__)

USAGE = "Usage: strings-audit <project root path> <base language code>"


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1

    try:
        settings = load_settings(*args)
    except ValidationError as e:
        print(USAGE, file=sys.stderr)
        for err in e.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            print(f"  ❌ {field}: {err['msg']}", file=sys.stderr)
        return 1

    logger.info(
        "開始檢查：root=%s base=%s file=%s workers=%d",
        settings.root_dir,
        settings.base_lang,
        settings.strings_filename,
        settings.workers,
    )
    result = run_audit(
        settings.root_dir,
        settings.base_lang,
        strings_filename=settings.strings_filename,
        workers=settings.workers,
    )
    print(format_report(result))
    return 0 if result.ok else 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
