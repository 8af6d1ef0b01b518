"""Error raised by service backends when the service manager fails."""


class DownstreamInstallationError(RuntimeError):
    """The service manager (or the filesystem under it) rejected an operation.

    The message carries the tool's own error output unmodified.
    """
