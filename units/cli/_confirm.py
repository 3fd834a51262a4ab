"""Interactive yes/no confirmation."""

import click
import typer


def _confirm(prompt: str) -> bool:
    """Ask the user; no answer (EOF or Ctrl+C at the prompt) counts as no."""
    try:
        return typer.confirm(prompt, default=False, err=True)
    except click.exceptions.Abort:
        return False
