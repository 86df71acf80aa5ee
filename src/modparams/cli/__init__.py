"""Command-line interface for modparams."""
