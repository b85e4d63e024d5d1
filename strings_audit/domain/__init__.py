"""domain package — pure checking rules, no I/O."""
