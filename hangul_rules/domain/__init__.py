"""Domain logic (no I/O)."""
