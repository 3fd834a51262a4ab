"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Leveled messages on stderr, structured output on stdout.

    Streams are bound at construction, so build one per command run.
    """

    def __init__(self):
        self.stdout = sys.stdout
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if self.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        self.stdout.write(text)
