"""strings-audit — cross-locale consistency checks for Apple .strings resources."""

__version__ = "1.0.0"
