"""Reading the PHP manual's DocBook function reference, with fuzzy matching and layout helpers."""

__version__ = "0.1.0"