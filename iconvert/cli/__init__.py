"""Command-line interface for iconvert."""
