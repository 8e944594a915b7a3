"""Wyjątki zgłaszane podczas zrzutu bazy."""


class DumpError(Exception):
    """Bazowy wyjątek dla błędów zrzutu."""


class ProcessLaunchError(DumpError):
    """Nie udało się uruchomić zewnętrznego polecenia."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Nie można uruchomić '{command}': {reason}")


class MalformedOutputError(DumpError):
    """Wyjście sqlite3 nie ma oczekiwanego formatu."""

    def __init__(self, table: str, line: str):
        self.table = table
        self.line = line
        super().__init__(f"Nieprawidłowa linia schematu tabeli '{table}': {line!r}")


class ArgumentError(DumpError):
    """Niepoprawna liczba argumentów wywołania."""
