"""Command-line tools for caseintel."""
