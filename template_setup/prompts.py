"""Console I/O for the interactive setup.

Every component that talks to the operator receives a ``Prompter``: one
input stream plus one Rich ``Console``.  Questions are strictly sequential;
``ask`` blocks until a full line is available.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

AFFIRMATIVE = "y"


class Prompter:
    """Question/answer turns and status output on a text console."""

    def __init__(
        self,
        input_stream: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.console = console if console is not None else Console()
        self.closed = False

    # -- Questions ---------------------------------------------------------

    def ask(self, query: str) -> str:
        """Print *query* and block for one line of input.

        The trailing line ending is stripped.  End of input reads as an
        empty answer.
        """
        self.console.print(f"{query}\n=> ", end="", markup=False, highlight=False)
        line = self.input_stream.readline()
        return line.rstrip("\r\n")

    def confirm(self, query: str) -> bool:
        """Ask a yes/no question.  Only a case-insensitive ``y`` is yes."""
        return self.ask(f"{query} (y/n)").lower() == AFFIRMATIVE

    def close(self) -> None:
        """End the conversation.  Further questions are not expected."""
        self.closed = True

    # -- Output ------------------------------------------------------------

    def print(self, message: str = "") -> None:
        self.console.print(message, markup=False, highlight=False)

    def print_step(self, title: str) -> None:
        """Print a full-width rule announcing a setup step."""
        self.console.print()
        self.console.print(Rule(f"[bold bright_cyan] {title} [/bold bright_cyan]", style="bright_cyan"))

    def print_summary_table(self, data: dict[str, str], title: str = "Log") -> None:
        """Print a two-column key/value summary table.

        Args:
            data: Mapping of label -> value.
            title: Table title.
        """
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("Item", style="dim", no_wrap=True)
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, str(value))

        self.console.print(table)
        self.console.print()

    def print_info(self, message: str) -> None:
        """Print a cyan informational message."""
        self.console.print(f"[cyan]{escape(message)}[/cyan]")

    def print_success(self, message: str) -> None:
        """Print a green success message."""
        self.console.print(f"[bold green]{escape(message)}[/bold green]")

    def print_warning(self, message: str) -> None:
        """Print a yellow warning message."""
        self.console.print(f"[bold yellow]{escape(message)}[/bold yellow]")

    def print_error(self, message: str) -> None:
        """Print a red error message."""
        self.console.print(f"[bold red]{escape(message)}[/bold red]")
