"""
Diagnostic sink for parameter loading.

Validation errors, deprecation advisories and informational lines are
recorded here and echoed to the console. The sink never aborts: whether
recorded errors are fatal is decided by whoever owns the sink (the command
line front end exits non-zero when any were recorded).
"""

import dataclasses
from enum import Enum
from typing import List

from rich.markup import escape

from .printer import cons


class Severity(Enum):
    ERROR   = "error"
    WARNING = "warning"
    INFO    = "info"


@dataclasses.dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    message:  str

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


class Diagnostics:
    """Records diagnostics in the order they were reported."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.records: List[Diagnostic] = []

    def _report(self, severity: Severity, message: str) -> None:
        self.records.append(Diagnostic(severity, message))

        if self.quiet:
            return

        if severity == Severity.ERROR:
            cons.print_err(f"[bold red]Error[/bold red]: {escape(message)}", highlight=False)
        elif severity == Severity.WARNING:
            cons.print_err(f"[bold yellow]Warning[/bold yellow]: {escape(message)}", highlight=False)
        else:
            cons.print(f"[yellow]INFO:[/yellow] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self._report(Severity.ERROR, message)

    def warn(self, message: str) -> None:
        self._report(Severity.WARNING, message)

    def info(self, message: str) -> None:
        self._report(Severity.INFO, message)

    def of(self, severity: Severity) -> List[str]:
        return [ d.message for d in self.records if d.severity == severity ]

    @property
    def errors(self) -> List[str]:
        return self.of(Severity.ERROR)

    @property
    def warnings(self) -> List[str]:
        return self.of(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.records)
