"""Command-line interface for pathident."""
