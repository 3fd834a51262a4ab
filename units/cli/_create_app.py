"""Create the main Typer CLI app."""

import logging
from pathlib import Path

import typer

from ..api.config.check_privileges import check_privileges
from ..api.config.get_fleet_root import get_fleet_root
from ..api.config.get_package_version import get_package_version
from ..api.fleet.cmd_install import cmd_install
from ..api.fleet.cmd_status import cmd_status
from ..api.fleet.cmd_uninstall import cmd_uninstall
from ..api.fleet.Fleet import Fleet
from ..api.UnitsError import UnitsError
from ..constants import UNITS_ROOT_ENV
from ..logging_config import setup_logging
from ._confirm import _confirm
from ._handle_stage_result import _handle_stage_result
from .display.CLIDisplay import CLIDisplay


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"units {get_package_version()}")
        raise typer.Exit()


def _build_fleet(ctx: typer.Context) -> Fleet:
    """Check privileges and build the Fleet from the global options."""
    obj = ctx.obj or {}
    try:
        check_privileges()
    except UnitsError as e:
        CLIDisplay().error(str(e))
        raise typer.Exit(1) from e
    return Fleet(
        root=get_fleet_root(obj.get("root")),
        force=obj.get("force", False),
        dry_run=obj.get("dry_run", False),
        confirm=_confirm,
    )


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Install, uninstall and inspect systemd unit bundles",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        force: bool = typer.Option(False, "--force", help="Skip confirmations and overwrite existing files"),
        dry_run: bool = typer.Option(False, "--dry-run", help="Show plan without executing"),
        root: Path | None = typer.Option(  # noqa: B008
            None, "--root", envvar=UNITS_ROOT_ENV, help="Directory containing one subdirectory per app"
        ),
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress details to stderr"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        setup_logging(logging.INFO if verbose else logging.WARNING)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["force"] = force
        ctx.obj["dry_run"] = dry_run
        ctx.obj["root"] = root

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="status")
    def status_cmd(
        ctx: typer.Context,
        app_name: str | None = typer.Argument(None, help="App to check; all apps if omitted"),
    ) -> None:
        """Show status of apps."""
        _handle_stage_result(cmd_status)(_build_fleet(ctx), app_name)

    @app.command(name="install")
    def install_cmd(
        ctx: typer.Context,
        app_name: str | None = typer.Argument(None, help="App to install; all apps if omitted"),
    ) -> None:
        """Install and start apps."""
        _handle_stage_result(cmd_install)(_build_fleet(ctx), app_name)

    @app.command(name="uninstall")
    def uninstall_cmd(
        ctx: typer.Context,
        app_name: str | None = typer.Argument(None, help="App to uninstall; all apps if omitted"),
    ) -> None:
        """Stop and uninstall apps."""
        _handle_stage_result(cmd_uninstall)(_build_fleet(ctx), app_name)

    @app.command(name="logs")
    def logs_cmd(
        ctx: typer.Context,
        app_name: str = typer.Argument(..., help="App whose journal to follow"),
    ) -> None:
        """Show logs for an app."""
        fleet = _build_fleet(ctx)
        display = CLIDisplay()
        display.status(f"Showing logs for {app_name} (Press Ctrl+C to exit)")
        try:
            fleet.show_logs(app_name)
        except KeyboardInterrupt:
            raise typer.Exit(130) from None
        except UnitsError as e:
            display.error(f"Failed to show logs for '{app_name}': {e}")
            raise typer.Exit(1) from e

    return app
