"""Sidecar render command - shows the flags and unit that apply would install."""

from collections.abc import Iterator

from .._output_schemas.sidecar import SidecarRenderOutput
from ..StageResult import StageResult
from ..config.AppConfig import AppConfig
from ..service.Service import Service
from ..service.render_command_line import render_command_line
from .build_service_descriptor import build_service_descriptor
from .resolve_sidecar_config import resolve_sidecar_config


def cmd_render() -> StageResult:
    """Render the sidecar service definition without touching the system."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = AppConfig.load()
            yield (0.3, "Resolving sidecar parameters...")
            sidecar_config = resolve_sidecar_config(config.defaults, config.sidecar)
            yield (0.6, "Building service descriptor...")
            descriptor = build_service_descriptor(sidecar_config)
            with Service(config.service) as service:
                unit = service.render_unit(descriptor)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error rendering sidecar: {e}"
            result_obj.output = SidecarRenderOutput(
                errors=[str(e)],
                warnings=[],
                run_state="",
                flags={},
                command=[],
                unit="",
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        flags = descriptor.merged_flags()
        warnings = [
            f"extra_params overrides typed flag '{key}'" for key in descriptor.extra_params if key in descriptor.flag_map
        ]
        result_obj.result = f"Rendered sidecar service ({descriptor.run_state}, {len(flags)} flag(s))"
        result_obj.output = SidecarRenderOutput(
            errors=[],
            warnings=warnings,
            run_state=descriptor.run_state,
            flags=flags,
            command=render_command_line(descriptor),
            unit=unit,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Rendering sidecar service...",
        progress_callback=do_work,
    )
