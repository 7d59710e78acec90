"""Core value objects, decisions and exceptions (no I/O)."""
