"""Two-player terminal quiz race where correct answers roll the die."""

__version__ = "1.0.0"