"""Serwisy zrzutu bazy."""

from .coercion import coerce_field
from .command_runner import CommandRunner, run_command
from .export_service import DatabaseExporter, ExportResult, open_reader
from .extractor import SqlAlchemyReader, SqliteCliReader, TableReader

__all__ = [
    "coerce_field",
    "CommandRunner",
    "run_command",
    "DatabaseExporter",
    "ExportResult",
    "open_reader",
    "SqlAlchemyReader",
    "SqliteCliReader",
    "TableReader",
]
