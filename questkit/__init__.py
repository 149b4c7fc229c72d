"""Quest criteria, progress tracking and update dispatch."""

__version__ = "0.1.0"

__all__ = ["compare", "criteria", "define", "handlers", "parse", "processor", "progress"]