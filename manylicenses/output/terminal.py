"""Terminal (stderr) output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape

from manylicenses.models.policy import PolicyViolation


class TerminalFormatter:
    """Report violations and errors on the error console.

    Messages are printed with ``soft_wrap`` so CI logs keep one message
    per line regardless of terminal width.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new stderr Console will be created.
        """
        self._console = console if console is not None else Console(stderr=True)

    def print_violation(self, violation: PolicyViolation) -> None:
        """Print a single violation as it is found."""
        self._console.print(
            f"[yellow]{escape(violation.describe())}[/yellow]", soft_wrap=True
        )

    def print_failure(self, message: str) -> None:
        """Print the run-level failure message."""
        self._console.print(f"[red bold]{escape(message)}[/red bold]", soft_wrap=True)

    def print_error(self, error: Exception) -> None:
        """Print a fatal error.

        Args:
            error: The exception that aborted the run.
        """
        message = f"Error: {type(error).__name__}: {error}"
        self._console.print(f"[red bold]{escape(message)}[/red bold]", soft_wrap=True)
