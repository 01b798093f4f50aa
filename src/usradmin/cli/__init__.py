"""CLI entry point package (usradmin)."""
