import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union
from urllib.parse import quote

from rmq_queue_activity.exceptions import ConfigError

DEFAULT_PORT = 55672
DEFAULT_WARN = 250.0
DEFAULT_CRITICAL = 500.0

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in _TRUTHY


def _to_number(value: Union[str, int, float], cast, option: str):
    try:
        return cast(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{option} must be a number, got {value!r}") from None


def split_queue_names(raw: Optional[Union[str, Iterable[str]]]) -> Tuple[str, ...]:
    """Split a comma separated queue list, keeping order and dropping blanks and repeats."""
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    names = []
    for part in parts:
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class ProbeConfig:
    """Connection settings and thresholds for one probe run."""

    queues: Tuple[str, ...]
    host: str = field(default_factory=lambda: os.getenv("RABBITMQ_HOST", "localhost"))
    port: int = field(default_factory=lambda: os.getenv("RABBITMQ_PORT", DEFAULT_PORT))
    ssl: bool = field(default_factory=lambda: _env_flag("RABBITMQ_SSL"))
    user: str = field(default_factory=lambda: os.getenv("RABBITMQ_USER", "guest"))
    password: str = field(default_factory=lambda: os.getenv("RABBITMQ_PASSWORD", "guest"), repr=False)
    vhost: Optional[str] = field(default_factory=lambda: os.getenv("RABBITMQ_VHOST") or None)
    warn: float = DEFAULT_WARN
    critical: float = DEFAULT_CRITICAL
    verbose: bool = False
    log_filename: Optional[str] = None

    def __post_init__(self) -> None:
        queues = split_queue_names(self.queues)
        if not queues:
            raise ConfigError("at least one queue name is required")
        port = _to_number(self.port, int, "port")
        if not 0 < port < 65536:
            raise ConfigError(f"port must be between 1 and 65535, got {port}")
        object.__setattr__(self, "queues", queues)
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "warn", _to_number(self.warn, float, "warn"))
        object.__setattr__(self, "critical", _to_number(self.critical, float, "critical"))

    @classmethod
    def from_options(
        cls,
        queue: Optional[str],
        host: Optional[str] = None,
        port: Optional[str] = None,
        ssl: Optional[bool] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        vhost: Optional[str] = None,
        warn: Union[str, float] = DEFAULT_WARN,
        critical: Union[str, float] = DEFAULT_CRITICAL,
        verbose: bool = False,
        log_filename: Optional[str] = None,
    ) -> "ProbeConfig":
        """Build a config from raw command line values.

        Options left as ``None`` fall back to the ``RABBITMQ_*`` environment
        variables and then to the built-in defaults.
        """
        overrides = {
            "host": host,
            "port": port,
            "ssl": ssl,
            "user": user,
            "password": password,
            "vhost": vhost,
        }
        kwargs = {key: value for key, value in overrides.items() if value is not None}
        return cls(
            queues=split_queue_names(queue),
            warn=warn,
            critical=critical,
            verbose=verbose,
            log_filename=log_filename,
            **kwargs,
        )

    @property
    def queues_url(self) -> str:
        scheme = "https" if self.ssl else "http"
        url = f"{scheme}://{self.host}:{self.port}/api/queues"
        if self.vhost:
            url = f"{url}/{quote(self.vhost, safe='')}"
        return url
