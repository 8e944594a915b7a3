"""Typowanie surowych pól tekstowych: integer, real, string lub null."""

import re
from typing import Optional, Union

FieldValue = Union[int, float, str, None]

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Liczba zmiennoprzecinkowa na początku tekstu (jak strtod, bez inf/nan/hex)
REAL_PREFIX_RE = re.compile(
    r"[ \t\n\r\f\v]*[+-]?(?!0[xX])(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def parse_integer(raw: str) -> Optional[int]:
    """Zwróć int, jeśli cały tekst jest liczbą całkowitą."""
    if not INTEGER_RE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Limit cyfr przy konwersji str -> int (Python 3.11+)
        return None


def parse_real(raw: str, strict: bool = False) -> Optional[float]:
    """Zwróć float z początkowego fragmentu liczbowego.

    Args:
        raw: Surowa wartość pola
        strict: Wymagaj, aby cały tekst był liczbą

    Returns:
        float lub None, gdy tekst nie zaczyna się od liczby
    """
    match = REAL_PREFIX_RE.fullmatch(raw) if strict else REAL_PREFIX_RE.match(raw)
    if match is None:
        return None
    value = float(match.group(0))
    # Przepełnienie daje inf, którego JSON nie obsługuje
    if value in (float("inf"), float("-inf")):
        return None
    return value


def coerce_field(raw: str, strict_reals: bool = False) -> FieldValue:
    """Zamień surowe pole na wartość typowaną.

    Puste pole -> None, potem kolejno próby: integer (cały tekst),
    real (początek tekstu), a na końcu oryginalny string.
    """
    if raw == "":
        return None

    integer = parse_integer(raw)
    if integer is not None:
        return integer

    real = parse_real(raw, strict=strict_reals)
    if real is not None:
        return real

    return raw
