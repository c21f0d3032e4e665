import logging

from rmq_queue_activity.config import ProbeConfig
from rmq_queue_activity.exceptions import ConfigError, ProbeError
from rmq_queue_activity.messages import QueueRecord, Status, Verdict
from rmq_queue_activity.probe import QueueActivityProbe

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["ProbeConfig", "ConfigError", "ProbeError", "QueueRecord", "Status", "Verdict", "QueueActivityProbe"]
