"""Interface web."""
