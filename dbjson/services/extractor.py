"""Odczyt listy tabel, kolumn i rekordów z bazy SQLite."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from ..errors import MalformedOutputError
from .command_runner import CommandRunner, quote
from .text_utils import omit_blank, split_string, trim_string

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
LINE_SEPARATOR = "\n"

Record = list[str]


def keep_record(record: Record) -> bool:
    """Czy rekord nie jest artefaktem pustej linii.

    Odrzuca rekordy bez pól oraz takie, w których wszystkie pola są puste
    (również prawdziwe wiersze z samymi NULL-ami, nie da się ich odróżnić).
    """
    return len(record) > 0 and any(field != "" for field in record)


class TableReader(ABC):
    """Wspólny interfejs czytników bazy."""

    @abstractmethod
    def list_tables(self) -> list[str]:
        """Nazwy tabel w kolejności podanej przez silnik."""

    @abstractmethod
    def table_columns(self, table: str) -> list[str]:
        """Nazwy kolumn tabeli w kolejności schematu."""

    @abstractmethod
    def table_records(self, table: str) -> list[Record]:
        """Rekordy tabeli jako listy surowych pól tekstowych."""


class SqliteCliReader(TableReader):
    """Czytnik parsujący tekstowe wyjście programu sqlite3.

    Format `PRAGMA table_info`: pole 0 to numer kolumny, pole 1 nazwa,
    pozostałe (typ, ograniczenia) są ignorowane.
    """

    def __init__(
        self,
        db_path: str,
        runner: Optional[CommandRunner] = None,
        sqlite_binary: str = "sqlite3",
    ):
        self.db_path = db_path
        self.runner = runner or CommandRunner()
        self.sqlite_binary = sqlite_binary

    def _sqlite(self, *args: str) -> str:
        return self.runner.run(self.sqlite_binary, quote(self.db_path), *args)

    def list_tables(self) -> list[str]:
        output = self._sqlite(".tables")

        # .tables wypisuje nazwy w kolumnach, czasem w kilku liniach
        tokens = []
        for line in split_string(output, LINE_SEPARATOR):
            tokens.extend(split_string(line, " "))

        return [trim_string(token) for token in omit_blank(tokens)]

    def table_columns(self, table: str) -> list[str]:
        output = self._sqlite(quote(f"PRAGMA table_info({table});"))
        lines = omit_blank(split_string(output, LINE_SEPARATOR))

        columns = []
        for line in lines:
            parts = split_string(line, FIELD_SEPARATOR)
            if len(parts) < 2:
                raise MalformedOutputError(table, line)
            columns.append(parts[1])

        return columns

    def table_records(self, table: str) -> list[Record]:
        output = self._sqlite(quote(f"SELECT * FROM '{table}';"))

        records = []
        for line in split_string(output, LINE_SEPARATOR):
            # Wyjście CRLF (Windows)
            if line.endswith("\r"):
                line = line[:-1]
            record = split_string(line, FIELD_SEPARATOR)
            if keep_record(record):
                records.append(record)

        return records


def render_value(value) -> str:
    """Zamień wartość z bazy na tekst tak, jak wypisuje ją sqlite3."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class SqlAlchemyReader(TableReader):
    """Czytnik korzystający bezpośrednio z bazy przez SQLAlchemy.

    Wartości są zwracane jako tekst, żeby typowanie pól działało tak samo
    jak dla wyjścia sqlite3.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def list_tables(self) -> list[str]:
        inspector = inspect(self.engine)
        # .tables w sqlite3 pokazuje również widoki
        names = inspector.get_table_names() + inspector.get_view_names()
        return sorted(names)

    def table_columns(self, table: str) -> list[str]:
        return [column["name"] for column in inspect(self.engine).get_columns(table)]

    def table_records(self, table: str) -> list[Record]:
        quoted = self.engine.dialect.identifier_preparer.quote_identifier(table)

        records = []
        with self.engine.connect() as conn:
            for row in conn.execute(text(f"SELECT * FROM {quoted}")):
                record = [render_value(value) for value in row]
                if keep_record(record):
                    records.append(record)

        return records
