"""sflang — compiler for the SF document markup language."""

__version__ = "0.3.0"
