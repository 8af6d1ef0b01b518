"""Service stop command - stops the sidecar service."""

from collections.abc import Iterator

from ...constants import SIDECAR_NAME
from .._output_schemas.service import ServiceStopOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from .Service import Service


def cmd_stop() -> StageResult:
    """Stop sidecar via system service manager."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AppConfig.load()
            yield (0.5, "Stopping service...")
            with Service(config.service) as service:
                result = service.stop_service(SIDECAR_NAME)
        except Exception as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        if result["success"]:
            message = "Service is already stopped" if "note" in result else "Service stopped successfully"
            errors = []
        else:
            message = f"Error stopping service: {result['error']}"
            errors = [result["error"]]
        result_obj.result = message
        result_obj.output = ServiceStopOutput(
            errors=errors,
            warnings=[],
            message=message,
            stopped=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Stopping service...",
        progress_callback=do_work,
    )
