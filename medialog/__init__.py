"""Keep a personal media list in a CSV file from an interactive terminal menu."""

__version__ = "0.1.0"