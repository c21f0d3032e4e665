class ProbeError(Exception):
    """Raised when the management API could not be queried."""


class ConfigError(ValueError):
    """Raised when invocation options are invalid."""
