"""Sidecar apply command - installs the sidecar and brings it to its run-state."""

from collections.abc import Iterator

from .._output_schemas.sidecar import SidecarApplyOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from .derive_run_state import derive_run_state
from .install_sidecar import install_sidecar
from .resolve_sidecar_config import resolve_sidecar_config


def cmd_apply() -> StageResult:
    """Apply the configured sidecar through the service backend.

    Validation errors abort before anything is written. Service manager
    errors are reported with their original message.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        backend_type = ""
        run_state = ""
        try:
            config = AppConfig.load()
            backend_type = config.service.type
            yield (0.3, "Resolving sidecar parameters...")
            sidecar_config = resolve_sidecar_config(config.defaults, config.sidecar)
            run_state = derive_run_state(sidecar_config.ensure)
            yield (0.6, "Applying service descriptor...")
            result = install_sidecar(sidecar_config, config.service)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error applying sidecar: {e}"
            result_obj.output = SidecarApplyOutput(
                errors=[str(e)],
                warnings=[],
                type=backend_type,
                run_state=run_state,
                unit_path="",
                applied=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        changed = "updated" if result.get("changed") else "unchanged"
        result_obj.result = f"Sidecar applied ({result['run_state']}, unit {changed})"
        result_obj.output = SidecarApplyOutput(
            errors=[],
            warnings=[],
            type=result["type"],
            run_state=result["run_state"],
            unit_path=result["unit_path"],
            applied=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Applying sidecar service...",
        progress_callback=do_work,
    )
