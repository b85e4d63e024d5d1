"""
Domain — 集中管理所有常數。
避免散落在各模組中的 magic numbers / magic strings。
"""

# ---------------------------------------------------------------------------
# Resource Layout
# ---------------------------------------------------------------------------
DEFAULT_STRINGS_FILENAME = "Localizable.strings"
LOCALE_DIR_SUFFIX = ".lproj"

# ---------------------------------------------------------------------------
# Placeholder Vocabulary
# ---------------------------------------------------------------------------
LITERAL_ESCAPE_TOKENS = ("%%", "\\n")  # "\\n" is the two-character backslash-n escape
CONVERSION_SUFFIXES = ("s", "d", "@")
MAX_POSITIONAL_INDEX = 20  # %1$s .. %20$s; anything above is not a recognised placeholder

# Characters that may legally follow a single '%' (see placeholders.STRAY_PERCENT_PATTERN)
STRAY_PERCENT_ALLOWED_FOLLOWERS = "%@dsf"

# ---------------------------------------------------------------------------
# Failure Messages (one line per failure category)
# ---------------------------------------------------------------------------
MSG_BASE_FILE_MISSING = "Base language file not found."
MSG_BASE_FILE_UNPARSABLE = "Base language file could not be parsed: {reason}"
MSG_PARSE_FAILURE = "File could not be parsed: {reason}"
MSG_KEY_MISMATCH = "Keys are not matched"
MSG_COMMENT_MISMATCH = "Comments are not matched"
MSG_PLACEHOLDER_MISMATCH = "Replacement strings are not matched"
MSG_STRAY_PERCENT = "Single percent characters are not matched"
MSG_BASE_STRAY_PERCENT = "Base language file contains a single % character."

# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------
DEFAULT_WORKERS = 1
