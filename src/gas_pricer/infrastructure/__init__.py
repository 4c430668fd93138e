"""File-backed configuration storage."""
