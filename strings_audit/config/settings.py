"""
Config — 執行參數驗證。
在 CLI 啟動時呼叫一次 load_settings()；結果只由兩個位置參數決定。
"""

from pydantic import BaseModel, DirectoryPath, Field, field_validator

from strings_audit.domain.constants import DEFAULT_STRINGS_FILENAME, DEFAULT_WORKERS


class AuditSettings(BaseModel):
    """單次檢查的輸入參數。"""

    root_dir: DirectoryPath
    base_lang: str = Field(min_length=1)
    strings_filename: str = Field(default=DEFAULT_STRINGS_FILENAME, min_length=1)
    workers: int = Field(default=DEFAULT_WORKERS, ge=1)

    @field_validator("base_lang", "strings_filename")
    @classmethod
    def _no_path_separators(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        if "/" in value or "\\" in value:
            raise ValueError("must be a plain name, not a path")
        return value


def load_settings(root_dir: str, base_lang: str) -> AuditSettings:
    """
    Build validated settings from the two CLI arguments.

    The resource file name and worker count keep their defaults; callers that
    need other values pass them to run_audit() directly.

    Raises:
        pydantic.ValidationError: invalid root directory or locale code.
    """
    return AuditSettings(root_dir=root_dir, base_lang=base_lang)
