"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

import typer

from ths.api.validate_output import validate_output
from ths.utils.display.Display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema.

    Raises:
        typer.Exit: Always; exit code 0 on success, 1 otherwise
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Output structure mismatches are programming errors
    result.output = validate_output(func, result.output)

    # Stage 3: Result
    for warning in result.output.get("warnings", []):
        display.warning(warning)
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    raise typer.Exit(0 if result.success else 1)
