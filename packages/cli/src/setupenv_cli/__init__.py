"""Command-line interface for setup-environments."""
