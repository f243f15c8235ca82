import logging
from typing import List

import pytest

from netalert import Subscriber
from netalert.observability import configure_logging

OUTAGE = "We are experiencing a temporary outage. We apologize for the inconvenience."


class RecordingSubscriber(Subscriber):
    """Appends (subscriber_id, message) to a shared log on every receive."""

    def __init__(self, subscriber_id: str, log: List[tuple]) -> None:
        super().__init__(subscriber_id)
        self.log = log

    def receive(self, message: str) -> None:
        self.log.append((self.subscriber_id, message))


class FailingSubscriber(Subscriber):
    def receive(self, message: str) -> None:
        raise RuntimeError("receiver down")


@pytest.fixture(autouse=True)
def quiet_logging():
    _reset_netalert_handlers()
    configure_logging(logging.WARNING)
    yield
    _reset_netalert_handlers()
    configure_logging(logging.WARNING)


def _reset_netalert_handlers() -> None:
    # Handlers may still point at a previous test's (now closed) capture stream.
    root = logging.getLogger("netalert")
    for handler in list(root.handlers):
        root.removeHandler(handler)


@pytest.fixture
def outage() -> str:
    return OUTAGE


@pytest.fixture
def log() -> List[tuple]:
    return []
