"""Internal helpers (config stack, colors, logging)."""
