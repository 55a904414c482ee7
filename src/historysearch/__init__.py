"""Search a local Chrome history database."""

__version__ = "0.1.0"
