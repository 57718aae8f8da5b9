"""Template library helpers."""
