"""Fleet uninstall command - stops and removes one or all apps."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..UnitsError import UnitsError
from .Fleet import Fleet
from .FleetOutputs import AppActionsEntry, FleetUninstallOutput


def cmd_uninstall(fleet: Fleet, name: str | None = None) -> StageResult:
    """Uninstall ``name``, or every app in the fleet.

    A declined confirmation skips that app and is not an error.
    """
    prefix = "[DRY RUN] " if fleet.dry_run else ""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Discovering apps..." if name is None else f"Loading app {name}...")
        output = FleetUninstallOutput(dry_run=fleet.dry_run)
        try:
            for app, actions in fleet.uninstall_apps(name):
                if actions is None:
                    output.apps.append(AppActionsEntry(name=app.name, cancelled=True))
                    yield (0.5, f"Uninstall of {app.name} cancelled")
                    continue
                output.apps.append(AppActionsEntry(name=app.name, actions=actions))
                if fleet.dry_run:
                    yield (0.5, f"{prefix}Planned uninstall of {app.name} ({len(actions)} actions)")
                else:
                    yield (0.5, f"App {app.name} uninstalled")
        except (UnitsError, OSError) as e:
            output.errors.append(str(e))

        if not output.apps and not output.errors:
            output.warnings.append("No apps found")

        yield (1.0, "Complete")
        done = [entry.name for entry in output.apps if not entry.cancelled]
        if output.errors:
            result_obj.result = f"Error uninstalling apps: {output.errors[0]}"
        elif output.warnings:
            result_obj.result = output.warnings[0]
        elif not done:
            result_obj.result = "Uninstall cancelled"
        elif fleet.dry_run:
            result_obj.result = f"{prefix}Would uninstall {', '.join(done)}"
        else:
            result_obj.result = f"Uninstalled {', '.join(done)}"
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = not output.errors

    return StageResult(
        announce=f"{prefix}Uninstalling apps..." if name is None else f"{prefix}Uninstalling app {name}...",
        progress_callback=do_work,
    )
