"""Internal helpers for tagmark."""
