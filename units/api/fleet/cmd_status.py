"""Fleet status command - reports the status of one or all apps."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ..UnitsError import UnitsError
from .Fleet import Fleet
from .FleetOutputs import AppStatusEntry, FleetStatusOutput


def cmd_status(fleet: Fleet, name: str | None = None) -> StageResult:
    """Get the status of ``name``, or of every app in the fleet."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Discovering apps..." if name is None else f"Loading app {name}...")
        output = FleetStatusOutput()
        try:
            for app, status in fleet.status(name):
                output.apps.append(AppStatusEntry(name=app.name, status=status.value, label=status.label))
                yield (0.5, f"Status for {app.name}: {status}")
        except (UnitsError, OSError) as e:
            output.errors.append(str(e))

        if not output.apps and not output.errors:
            output.warnings.append("No apps found")

        yield (1.0, "Complete")
        if output.errors:
            result_obj.result = f"Error getting status: {output.errors[0]}"
        elif output.warnings:
            result_obj.result = output.warnings[0]
        else:
            result_obj.result = ", ".join(f"{entry.name}: {entry.label}" for entry in output.apps)
        result_obj.output = output.model_dump(mode="python")
        result_obj.success = not output.errors

    return StageResult(
        announce="Checking app status..." if name is None else f"Checking status of {name}...",
        progress_callback=do_work,
    )
