#!/usr/bin/env python3
"""Skrypt do zrzutu bazy SQLite do pliku JSON.

Użycie:
    python scripts/dump_db_to_json.py <ścieżka-do-pliku-bazy.db>

Przykład:
    python scripts/dump_db_to_json.py dane/sklep.db   # -> dane/sklep.json
"""

import sys
from pathlib import Path

# Dodaj katalog projektu do ścieżki
sys.path.insert(0, str(Path(__file__).parent.parent))

from dbjson.main import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
