"""Abstract Subscriber: anything that can receive a provider's broadcast."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from netalert.observability import get_logger

if TYPE_CHECKING:
    from netalert.provider import NetworkProvider


class Subscriber(ABC):
    """Abstract base class for subscribers that receive messages from network providers."""

    def __init__(self, subscriber_id: str) -> None:
        self._subscriber_id = subscriber_id
        self._logger = get_logger(f"netalert.subscriber.{subscriber_id}")

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    @abstractmethod
    def receive(self, message: str) -> None:
        """Handle a message delivered by a provider. Must be implemented by subclasses."""
        pass

    def on_register(self, provider: "NetworkProvider") -> None:
        """Called when this subscriber is added to a provider (for observability)."""
        self._logger.info(
            "registered",
            extra={"provider": provider.display_name, "subscriber_id": self._subscriber_id},
        )

    def on_deregister(self, provider: "NetworkProvider") -> None:
        """Called when this subscriber is removed from a provider (for observability)."""
        self._logger.info(
            "deregistered",
            extra={"provider": provider.display_name, "subscriber_id": self._subscriber_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._subscriber_id!r})"
