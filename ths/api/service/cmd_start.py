"""Service start command - starts the sidecar service."""

from collections.abc import Iterator

from ...constants import SIDECAR_NAME
from .._output_schemas.service import ServiceStartOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from .Service import Service


def cmd_start() -> StageResult:
    """Start sidecar via system service manager.

    Fails if the unit has not been written yet (use ``thsc sidecar apply``).
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AppConfig.load()
            yield (0.5, "Starting via service manager...")
            with Service(config.service) as service:
                result = service.start_service(SIDECAR_NAME)
        except Exception as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        if result["success"]:
            message = "Service started successfully"
            errors = []
        else:
            message = f"Error starting service: {result['error']}"
            errors = [result["error"]]
        result_obj.result = message
        result_obj.output = ServiceStartOutput(
            errors=errors,
            warnings=[],
            message=message,
            running=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Starting service...",
        progress_callback=do_work,
    )
