"""Command-line interface for vresolve."""
