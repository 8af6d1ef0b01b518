"""Flag map construction for the sidecar command line."""

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .SidecarConfig import SidecarConfig

FlagValue = Union[str, bool, int, list[str]]

# (flag name, SidecarConfig field) in command-line order.
# Flag names are the thanos CLI vocabulary and must not be altered.
FLAG_FIELDS: tuple[tuple[str, str], ...] = (
    ("log.level", "log_level"),
    ("log.format", "log_format"),
    ("tracing.config-file", "tracing_config_file"),
    ("http-address", "http_address"),
    ("http-grace-period", "http_grace_period"),
    ("grpc-address", "grpc_address"),
    ("grpc-grace-period", "grpc_grace_period"),
    ("grpc-server-tls-cert", "grpc_server_tls_cert"),
    ("grpc-server-tls-key", "grpc_server_tls_key"),
    ("grpc-server-tls-client-ca", "grpc_server_tls_client_ca"),
    ("prometheus.url", "prometheus_url"),
    ("prometheus.ready_timeout", "prometheus_ready_timeout"),
    ("tsdb.path", "tsdb_path"),
    ("reloader.config-file", "reloader_config_file"),
    ("reloader.config-envsubst-file", "reloader_config_envsubst_file"),
    ("reloader.rule-dir", "reloader_rule_dirs"),
    ("reloader.watch-interval", "reloader_watch_interval"),
    ("reloader.retry-interval", "reloader_retry_interval"),
    ("objstore.config-file", "objstore_config_file"),
    ("shipper.upload-compacted", "shipper_upload_compacted"),
    ("min-time", "min_time"),
)


def build_flag_map(config: "SidecarConfig") -> dict[str, FlagValue]:
    """Build the ordered flag map for ``config``.

    Unset optional fields and empty lists are left out entirely. Values are
    kept with their native type; the installer decides how to render them.
    """
    flag_map: dict[str, FlagValue] = {}
    for flag, field_name in FLAG_FIELDS:
        value = getattr(config, field_name)
        if value is None:
            continue
        if isinstance(value, list):
            if not value:
                continue
            value = list(value)
        flag_map[flag] = value
    return flag_map
