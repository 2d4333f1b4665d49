"""rotchess: chess on a continuous board with rotating pieces."""

__version__ = "0.1.0"
