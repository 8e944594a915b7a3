"""Pomocnicze operacje na tekście wyjścia sqlite3."""

WHITESPACE = " \t\n\r"


def split_string(text: str, separator: str) -> list[str]:
    """Podziel tekst na każdym wystąpieniu separatora.

    Zawsze zwraca co najmniej jeden element, a `separator.join(...)`
    odtwarza tekst wejściowy.
    """
    if not separator:
        raise ValueError("Separator nie może być pusty")
    return text.split(separator)


def trim_string(text: str) -> str:
    """Usuń białe znaki z początku i końca."""
    return text.strip(WHITESPACE)


def is_blank(text: str) -> bool:
    return trim_string(text) == ""


def omit_blank(strings: list[str]) -> list[str]:
    """Usuń puste elementy, zachowując kolejność pozostałych."""
    return [s for s in strings if not is_blank(s)]
