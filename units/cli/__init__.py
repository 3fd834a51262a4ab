"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        # Not standalone: typer.Exit comes back as the return value
        rc = app(argv, prog_name="units", standalone_mode=False)
        return rc if isinstance(rc, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except click.exceptions.Abort:
        return 130
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
