from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple


class Status(IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


def _rate(value: Optional[float]) -> float:
    # brokers omit the rate until the queue has seen traffic; that counts as zero
    if value is None:
        return 0.0
    return float(value)


@dataclass(frozen=True)
class QueueRecord:
    name: str
    avg_ingress_rate: float = 0.0
    avg_egress_rate: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "avg_ingress_rate", _rate(self.avg_ingress_rate))
        object.__setattr__(self, "avg_egress_rate", _rate(self.avg_egress_rate))

    @classmethod
    def from_api(cls, payload: dict) -> "QueueRecord":
        """Build a record from one entry of the management API queue listing."""
        status = payload.get("backing_queue_status") or {}
        return cls(
            name=payload["name"],
            avg_ingress_rate=status.get("avg_ingress_rate"),
            avg_egress_rate=status.get("avg_egress_rate"),
        )


@dataclass(frozen=True)
class Verdict:
    status: Status
    messages: Tuple[str, ...] = ()

    @property
    def summary(self) -> str:
        return ", ".join(self.messages)
