"""Retry policies for background store writes."""

import time

from userdir.application.ports import Sleeper

CREATE_RETRY_DELAY = 5.0


class FixedDelay:
    """Waits the same number of seconds after every failed attempt."""

    def __init__(self, delay: float = CREATE_RETRY_DELAY, sleep: Sleeper = time.sleep) -> None:
        if delay < 0:
            raise ValueError("Retry delay must be non-negative.")
        self.delay = delay
        self._sleep = sleep

    def wait(self, attempt: int) -> None:
        self._sleep(self.delay)

    def __repr__(self) -> str:
        return f"FixedDelay(delay={self.delay!r})"
