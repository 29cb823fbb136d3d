"""A small interactive shell front end: quote checking, word splitting and tokens."""

__version__ = "0.1.0"
__all__ = ["quotes", "splitter", "tokens", "shell"]