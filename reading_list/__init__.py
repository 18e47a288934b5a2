"""My Reading List: book entries rendered as a configurable list block."""

__version__ = "0.1.0"
