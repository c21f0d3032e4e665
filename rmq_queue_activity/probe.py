import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

import requests

from rmq_queue_activity.config import ProbeConfig
from rmq_queue_activity.decorators import fetch_boundary
from rmq_queue_activity.exceptions import ProbeError
from rmq_queue_activity.messages import QueueRecord, Status, Verdict

UNREACHABLE = "could not get queue information"


@dataclass
class QueueActivityProbe:
    """Checks the combined ingress/egress rates of a set of queues"""

    config: ProbeConfig
    logger: logging.Logger = field(init=False)

    def __post_init__(self) -> None:
        self._initialize_logging()

    def _initialize_logging(self) -> None:
        self.logger = logging.getLogger(__name__)

        if self.config.verbose:
            log_filename = self.config.log_filename or datetime.now().strftime(
                "rmq_queue_activity_%Y%m%d_%H%M%S.log"
            )
            file_handler = logging.FileHandler(filename=os.path.join(os.getcwd(), log_filename))
            formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.logger.setLevel(logging.DEBUG)
        else:
            self.logger.setLevel(logging.WARNING)

    @fetch_boundary
    def fetch_queues(self) -> List[QueueRecord]:
        """List every queue known to the broker."""
        response = requests.get(self.config.queues_url, auth=(self.config.user, self.config.password))
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise TypeError(f"expected a list of queues, got {type(payload).__name__}")
        records = [QueueRecord.from_api(item) for item in payload]
        self.logger.debug(f"fetch_queues received {len(records)} records")
        return records

    def evaluate(self, records: Sequence[QueueRecord]) -> Verdict:
        """Sum the rates of the requested queues and compare them to the thresholds."""
        crit: List[str] = []
        warn: List[str] = []
        queues_list: List[str] = []
        total_ingress = 0.0
        total_egress = 0.0
        available = {record.name for record in records}

        for name in self.config.queues:
            if name not in available:
                warn.append(f"Queue {name} not available")
                continue
            for record in records:
                if record.name != name:
                    continue
                total_ingress += record.avg_ingress_rate
                total_egress += record.avg_egress_rate
                self.logger.debug(
                    f"evaluate matched {name}: ingress={record.avg_ingress_rate} egress={record.avg_egress_rate}"
                )
                queues_list.append(f"{name}: {record.avg_ingress_rate}/{record.avg_egress_rate}")

        self.logger.debug(f"evaluate totals: ingress={total_ingress} egress={total_egress}")

        # low traffic on either side trips the thresholds
        if total_ingress <= self.config.warn or total_egress <= self.config.warn:
            if total_ingress <= self.config.critical or total_egress <= self.config.critical:
                crit.append(", ".join(queues_list))
            else:
                warn.append(", ".join(queues_list))

        if crit:
            return Verdict(Status.CRITICAL, tuple(crit))
        if warn:
            return Verdict(Status.WARNING, tuple(warn))
        return Verdict(Status.OK)

    def check(self) -> Verdict:
        """Fetch the queue listing and evaluate it."""
        try:
            records = self.fetch_queues()
        except ProbeError:
            return Verdict(Status.WARNING, (UNREACHABLE,))
        return self.evaluate(records)
