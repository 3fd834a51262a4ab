"""Fleet install command - installs and starts one or all apps."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..UnitsError import UnitsError
from .Fleet import Fleet
from .FleetOutputs import AppActionsEntry, FleetInstallOutput


def cmd_install(fleet: Fleet, name: str | None = None) -> StageResult:
    """Install ``name``, or every app in the fleet.

    Stops at the first app that fails; apps installed before it stay installed.
    """
    prefix = "[DRY RUN] " if fleet.dry_run else ""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Discovering apps..." if name is None else f"Loading app {name}...")
        output = FleetInstallOutput(dry_run=fleet.dry_run)
        try:
            for app, actions in fleet.install_apps(name):
                output.apps.append(AppActionsEntry(name=app.name, actions=actions))
                if fleet.dry_run:
                    yield (0.5, f"{prefix}Planned install of {app.name} ({len(actions)} actions)")
                else:
                    yield (0.5, f"App {app.name} installed and started")
        except (UnitsError, OSError) as e:
            output.errors.append(str(e))

        if not output.apps and not output.errors:
            output.warnings.append("No apps found")

        yield (1.0, "Complete")
        installed = ", ".join(entry.name for entry in output.apps)
        if output.errors:
            result_obj.result = f"Error installing apps: {output.errors[0]}"
        elif output.warnings:
            result_obj.result = output.warnings[0]
        elif fleet.dry_run:
            result_obj.result = f"{prefix}Would install {installed}"
        else:
            result_obj.result = f"Installed and started {installed}"
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = not output.errors

    return StageResult(
        announce=f"{prefix}Installing apps..." if name is None else f"{prefix}Installing app {name}...",
        progress_callback=do_work,
    )
