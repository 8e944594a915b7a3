"""Serwis do eksportu całej bazy do dokumentu JSON."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import Settings, get_settings
from ..database import create_db_engine
from .coercion import FieldValue, coerce_field
from .command_runner import CommandRunner
from .extractor import Record, SqlAlchemyReader, SqliteCliReader, TableReader

logger = logging.getLogger(__name__)

Document = dict[str, list[dict[str, FieldValue]]]


@dataclass
class ExportResult:
    """Wynik eksportu."""

    output_path: Optional[Path] = None
    tables_exported: int = 0
    records_per_table: dict[str, int] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    @property
    def records_exported(self) -> int:
        return sum(self.records_per_table.values())

    def to_dict(self) -> dict:
        return {
            "output_path": str(self.output_path) if self.output_path else None,
            "tables_exported": self.tables_exported,
            "records_exported": self.records_exported,
            "records_per_table": self.records_per_table,
            "warnings": self.warnings,
        }


def open_reader(db_path: str, settings: Optional[Settings] = None) -> TableReader:
    """Utwórz czytnik bazy zgodnie z ustawieniem `backend`."""
    settings = settings or get_settings()

    if settings.backend == "sqlalchemy":
        return SqlAlchemyReader(create_db_engine(db_path))

    runner = CommandRunner(
        timeout=settings.command_timeout,
        encoding=settings.output_encoding,
    )
    return SqliteCliReader(db_path, runner=runner, sqlite_binary=settings.sqlite_binary)


class DatabaseExporter:
    """Eksporter tabel bazy do JSON.

    Dokument ma postać {tabela: [{kolumna: wartość, ...}, ...]}, tabele
    i rekordy w kolejności zwróconej przez czytnik.
    """

    def __init__(self, reader: TableReader, settings: Optional[Settings] = None):
        self.reader = reader
        self.settings = settings or get_settings()
        self.result = ExportResult()

    def build_record(self, table: str, columns: list[str], record: Record) -> dict[str, FieldValue]:
        """Sparuj pola rekordu z nazwami kolumn i nadaj im typy.

        Pole NULL zostaje w rekordzie z wartością None.
        """
        if len(record) != len(columns):
            warning = (
                f"{table}: rekord ma {len(record)} pól, tabela ma {len(columns)} kolumn"
            )
            logger.warning(warning)
            self.result.warnings.append(warning)

        return {
            column: coerce_field(raw, strict_reals=self.settings.strict_reals)
            for column, raw in zip(columns, record)
        }

    def build_table(self, table: str) -> list[dict[str, FieldValue]]:
        columns = self.reader.table_columns(table)
        records = self.reader.table_records(table)

        rows = [self.build_record(table, columns, record) for record in records]
        self.result.records_per_table[table] = len(rows)
        logger.info("  %s: %d rekordów", table, len(rows))
        return rows

    def build_document(self) -> Document:
        """Zbuduj dokument dla wszystkich tabel bazy."""
        self.result = ExportResult()

        tables = self.reader.list_tables()
        logger.info("Znaleziono %d tabel: %s", len(tables), tables)

        document: Document = {}
        for table in tables:
            document[table] = self.build_table(table)
            self.result.tables_exported += 1

        return document

    def export(self, output_path) -> ExportResult:
        """Zapisz dokument JSON do pliku, nadpisując istniejący.

        Args:
            output_path: Ścieżka pliku wynikowego

        Returns:
            ExportResult: Podsumowanie eksportu
        """
        document = self.build_document()
        output_path = Path(output_path)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=self.settings.json_indent)

        self.result.output_path = output_path
        logger.info("Eksportowano do: %s", output_path)
        return self.result
