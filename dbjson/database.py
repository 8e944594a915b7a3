"""Połączenie z bazą SQLite przez SQLAlchemy (backend natywny)."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine


def sqlite_url(db_path) -> str:
    """Zbuduj URL SQLAlchemy otwierający plik bazy tylko do odczytu."""
    return f"sqlite:///file:{Path(db_path).resolve().as_posix()}?mode=ro&uri=true"


def create_db_engine(db_path) -> Engine:
    """Utwórz engine dla istniejącego pliku bazy."""
    path = Path(db_path)
    if not path.is_file():
        raise FileNotFoundError(f"Nie znaleziono pliku bazy: {path}")

    # SQLite - bez poolingu, tylko check_same_thread
    return create_engine(
        sqlite_url(path),
        connect_args={"check_same_thread": False},
    )
