"""Command-line interface for dir2clip."""
