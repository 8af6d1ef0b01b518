"""Build the sidecar service descriptor."""

from ...constants import SIDECAR_NAME
from ...utils.logger import get_logger
from .FlagMap import build_flag_map
from .ServiceDescriptor import ServiceDescriptor
from .SidecarConfig import SidecarConfig
from .derive_run_state import derive_run_state

logger = get_logger("sidecar")


def build_service_descriptor(config: SidecarConfig) -> ServiceDescriptor:
    """Turn a validated SidecarConfig into a ServiceDescriptor.

    Pure: building twice from the same config yields equal descriptors.
    """
    run_state = derive_run_state(config.ensure)
    flag_map = build_flag_map(config)
    logger.debug("Built sidecar descriptor: run_state=%s flags=%s", run_state, list(flag_map))
    return ServiceDescriptor(
        name=SIDECAR_NAME,
        run_state=run_state,
        bin_path=config.bin_path,
        user=config.user,
        group=config.group,
        max_open_files=config.max_open_files,
        flag_map=flag_map,
        extra_params=dict(config.extra_params),
        env_vars=list(config.env_vars),
    )
