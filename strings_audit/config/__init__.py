"""config package — run settings."""
