"""Service status command - shows whether the sidecar service is installed and running."""

from collections.abc import Iterator

from ...constants import SIDECAR_NAME
from .._output_schemas.service import ServiceStatusOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from .Service import Service


def cmd_status() -> StageResult:
    """Get sidecar service status."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = AppConfig.load()
            yield (0.5, "Checking service status...")
            with Service(config.service) as service:
                status = service.get_service_status(SIDECAR_NAME)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking service status: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                installed=False,
                running=False,
                pid=-1,
                unit_path="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if status.running:
            result_obj.result = f"Service running (PID: {status.pid})"
        elif status.installed:
            result_obj.result = "Service installed but not running"
        else:
            result_obj.result = "Service not installed"
        result_obj.output = ServiceStatusOutput(
            errors=[],
            warnings=[],
            installed=status.installed,
            running=status.running,
            pid=status.pid if status.pid is not None else -1,
            unit_path=status.unit_path,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
