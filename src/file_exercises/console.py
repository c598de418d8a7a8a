"""Console output and interactive input."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import Prompt

logger = logging.getLogger(__name__)


class Reporter:
    """Prints exercise output to the console.

    Text is printed as-is: no markup, no highlighting, no wrapping.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize reporter.

        Args:
            console: Console to print to. Defaults to a stdout console.
        """
        self.console = console or Console()

    def show_line(self, message: str) -> None:
        self.console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def show_lines(self, messages: list[str]) -> None:
        for message in messages:
            self.show_line(message)

    def show_raw(self, text: str) -> None:
        """Print file content untouched.

        Bypasses rich rendering, which would expand tabs and emoji codes.
        """
        typer.echo(text, file=self.console.file)

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.console.print(
            message, style="red", markup=False, emoji=False, highlight=False, soft_wrap=True
        )


class ConsoleInput:
    """Reads interactive input through a rich prompt."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def read_token(self, prompt: str) -> str:
        """Prompt for input and return its first whitespace-delimited token.

        Args:
            prompt: Prompt text; rich appends ": ".

        Returns:
            The first token; blank lines are skipped. An empty string at
            end of input.
        """
        try:
            answer = Prompt.ask(prompt, console=self.console)
            while not answer.split():
                answer = self.console.input()
        except EOFError:
            logger.debug("No input available for prompt %r", prompt)
            return ""
        return answer.split()[0]


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    """Send log records through rich; DEBUG when verbose, WARNING otherwise."""
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
