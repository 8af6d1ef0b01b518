"""Render a service descriptor into the binary's argument vector."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..sidecar.ServiceDescriptor import ServiceDescriptor


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_command_line(descriptor: "ServiceDescriptor") -> list[str]:
    """Return ``[bin_path, name, --flag=value, ...]`` for ``descriptor``.

    List values repeat the flag once per item, in order. None values
    (possible only through extra_params) are skipped.
    """
    args = [descriptor.bin_path, descriptor.name]
    for flag, value in descriptor.merged_flags().items():
        if value is None:
            continue
        items = value if isinstance(value, (list, tuple)) else [value]
        for item in items:
            args.append(f"--{flag}={_format_value(item)}")
    return args
