"""Command line interface for RTD schedule extraction."""
