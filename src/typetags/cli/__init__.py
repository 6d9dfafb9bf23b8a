"""Command-line interface for typetags."""
