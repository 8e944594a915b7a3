"""Zrzut bazy SQLite do dokumentu JSON."""

__version__ = "0.1.0"
