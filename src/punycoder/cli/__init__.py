"""Command-line interface for punycoder."""
