"""Wspolne fixtures testow."""

import sqlite3

import pytest

from dbjson.config import Settings, get_settings


class FakeRunner:
    """Runner zwracajacy przygotowane wyjście sqlite3 zamiast uruchamiac proces."""

    def __init__(self, outputs: dict[str, str]):
        self.outputs = outputs
        self.calls = []

    def run(self, *tokens) -> str:
        self.calls.append(tokens)
        return self.outputs[tokens[-1]]


PEOPLE_OUTPUTS = {
    ".tables": "people\n",
    '"PRAGMA table_info(people);"': (
        "0|id|INTEGER|0||1\n"
        "1|name|TEXT|0||0\n"
        "2|age|INTEGER|0||0\n"
    ),
    "\"SELECT * FROM 'people';\"": "1|Alice|30\n2|Bob|\n",
}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def people_runner():
    return FakeRunner(dict(PEOPLE_OUTPUTS))


def create_people_db(path):
    conn = sqlite3.connect(path)
    try:
        conn.execute("CREATE TABLE people (id INTEGER PRIMARY KEY, name TEXT, age INTEGER)")
        conn.execute("INSERT INTO people VALUES (1, 'Alice', 30)")
        conn.execute("INSERT INTO people VALUES (2, 'Bob', NULL)")
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def people_db(tmp_path):
    return create_people_db(tmp_path / "people.db")
