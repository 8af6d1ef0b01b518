"""Service uninstall command - removes the sidecar system service."""

from collections.abc import Iterator

from ...constants import SIDECAR_NAME
from .._output_schemas.service import ServiceUninstallOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from .Service import Service


def cmd_uninstall() -> StageResult:
    """Stop the sidecar and remove its unit."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = AppConfig.load()
            yield (0.5, "Uninstalling service...")
            with Service(config.service) as service:
                service.uninstall_service(SIDECAR_NAME)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error uninstalling service: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                uninstalled=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Service uninstalled successfully"
        result_obj.output = ServiceUninstallOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            uninstalled=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Uninstalling service...",
        progress_callback=do_work,
    )
