# decorators.py
import functools

import requests

from rmq_queue_activity.exceptions import ProbeError

FETCH_FAILED = "could not retrieve queue information"


def fetch_boundary(func):
    """Decorator that turns any failure to read the management API into a ProbeError."""

    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        self.logger.debug(f"{func.__name__} started against {self.config.queues_url}")
        try:
            result = func(self, *args, **kwargs)
        except (requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.error(f"{func.__name__} failed with exception: {e!r}")
            raise ProbeError(FETCH_FAILED) from e
        self.logger.debug(f"{func.__name__} completed")
        return result

    return wrapper
