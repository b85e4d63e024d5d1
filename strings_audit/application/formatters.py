"""
Application — 報告格式化。
將 AuditResult 轉為依檔案分組的文字清單。
"""

from strings_audit.domain.entities import AuditResult

SUCCESS_LINE = "✅ No errors found!"
FAILURE_HEADER = "🚨 Errors found:"


def format_report(result: AuditResult) -> str:
    if result.ok:
        return SUCCESS_LINE
    lines = [FAILURE_HEADER]
    for error in result.errors:
        lines.append(f"  {error.path}:")
        lines.extend(f"    {message}" for message in error.messages)
    return "\n".join(lines)
