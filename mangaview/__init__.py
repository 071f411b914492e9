"""State models for a terminal manga browser: reader pages, history feed, chapters, downloads, tag filters and carousels."""

__version__ = "0.1.0"