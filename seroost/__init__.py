"""Text extraction, a TF-IDF document index and an English Snowball stemmer."""

__version__ = "0.1.0"