"""Command-line interface for binarycoder."""
