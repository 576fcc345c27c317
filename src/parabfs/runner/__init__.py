"""Command-line traversal runner."""
