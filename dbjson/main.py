"""Punkt wejścia CLI: zrzut bazy SQLite do pliku JSON."""

import logging
import sys
from typing import Optional

from .config import Settings, get_settings
from .errors import ArgumentError
from .services.export_service import DatabaseExporter, ExportResult, open_reader

logger = logging.getLogger("dbjson")

USAGE = "Użycie: dump-db-to-json <ścieżka-do-pliku-bazy.db>"


def derive_output_path(db_file: str) -> str:
    """Ścieżka pliku JSON: tekst do pierwszej kropki + '.json'.

    Przykład: 'a.b.db' -> 'a.json', 'nodot' -> 'nodot.json'.
    """
    dot_pos = db_file.find(".")
    if dot_pos != -1:
        return db_file[:dot_pos] + ".json"
    return db_file + ".json"


def parse_args(argv: list[str]) -> str:
    """Zwróć ścieżkę bazy z argumentów (bez nazwy programu)."""
    if len(argv) == 0:
        raise ArgumentError("Podaj plik bazy danych do zrzutu")
    if len(argv) != 1:
        raise ArgumentError(f"Nieprawidłowe użycie, oczekiwano 1 argumentu, podano {len(argv)}")
    return argv[0]


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)5s %(message)s",
        stream=sys.stderr,
    )


def dump(db_file: str, settings: Optional[Settings] = None) -> ExportResult:
    """Zrzuć bazę do pliku JSON obok niej."""
    settings = settings or get_settings()
    reader = open_reader(db_file, settings)
    exporter = DatabaseExporter(reader, settings)
    return exporter.export(derive_output_path(db_file))


def main(argv: Optional[list[str]] = None) -> int:
    """Uruchom zrzut; zwraca kod wyjścia procesu."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        db_file = parse_args(argv)
    except ArgumentError as e:
        print(f"Błąd: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    settings = get_settings()
    configure_logging(settings)

    # Błędy konwersji są tylko logowane, kod wyjścia pozostaje 0
    try:
        result = dump(db_file, settings)
    except Exception as e:
        logger.error("BŁĄD: %s", e, exc_info=settings.debug)
        return 0

    summary = result.to_dict()
    logger.info(
        "Gotowe: %d tabel, %d rekordów, %d ostrzeżeń -> %s",
        summary["tables_exported"],
        summary["records_exported"],
        len(summary["warnings"]),
        summary["output_path"],
    )
    logger.debug("Rekordy w tabelach: %s", summary["records_per_table"])
    return 0


def run():
    """Uruchom narzędzie (dla CLI)."""
    sys.exit(main())


if __name__ == "__main__":
    run()
