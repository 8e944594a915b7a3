"""Uruchamianie zewnętrznych poleceń i przechwytywanie ich wyjścia."""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from ..errors import ProcessLaunchError

logger = logging.getLogger(__name__)

# Kody wyjścia powłoki, gdy program nie został znaleziony (sh / cmd.exe)
COMMAND_NOT_FOUND_CODES = (127, 9009)


def quote(value: str) -> str:
    """Otocz wartość cudzysłowami (ścieżki i zapytania SQL)."""
    return f'"{value}"'


def join_command(tokens) -> str:
    """Połącz tokeny polecenia pojedynczymi spacjami."""
    return " ".join(str(token) for token in tokens)


def run_command(
    tokens,
    timeout: Optional[float] = None,
    encoding: str = "utf-8",
) -> str:
    """Uruchom polecenie i zwróć całe jego standardowe wyjście.

    Tokeny są łączone spacjami w jedno polecenie powłoki, więc tokeny
    zawierające spacje muszą być wcześniej ujęte w cudzysłowy (patrz `quote`).

    Raises:
        ProcessLaunchError: gdy procesu nie da się uruchomić lub przekroczy timeout
    """
    command = join_command(tokens)
    logger.debug("Uruchamiam: %s", command)

    try:
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        raise ProcessLaunchError(command, f"przekroczono limit czasu {timeout}s")
    except OSError as e:
        raise ProcessLaunchError(command, str(e)) from e

    stderr = completed.stderr.decode(encoding, errors="replace").strip()
    if completed.returncode in COMMAND_NOT_FOUND_CODES:
        raise ProcessLaunchError(command, stderr or "nie znaleziono programu")
    if completed.returncode != 0:
        logger.warning(
            "Polecenie zakończone kodem %d: %s", completed.returncode, stderr
        )

    return completed.stdout.decode(encoding, errors="replace")


@dataclass(frozen=True)
class CommandRunner:
    """Uruchamia polecenia z ustalonym limitem czasu i kodowaniem.

    Każde wywołanie `run` buduje nowe polecenie, runner nie przechowuje
    stanu pomiędzy wywołaniami.
    """

    timeout: Optional[float] = None
    encoding: str = "utf-8"

    def run(self, *tokens) -> str:
        return run_command(tokens, timeout=self.timeout, encoding=self.encoding)
