"""CLI and logging helpers."""
