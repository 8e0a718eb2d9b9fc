"""Date and logging helpers."""
