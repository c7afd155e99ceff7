"""wcount - count lines, words, characters, and bytes."""

__version__ = "0.1.0"
