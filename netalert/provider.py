"""Network providers: the publishing side, one shared implementation for every variant."""

from enum import Enum
from typing import List, Optional

from netalert.notification import Notification
from netalert.observability import get_logger
from netalert.subscriber import Subscriber


class ProviderVariant(Enum):
    """The known network providers and the label each one is identified by."""

    TELNET = ("Telnet", "Blue")
    VODAHOUSE = ("Vodahouse", "Red")
    MNETWORK = ("Mnetwork", "Yellow")
    CMAC = ("CMac", "Black")

    def __init__(self, display_name: str, default_label: str) -> None:
        self.display_name = display_name
        self.default_label = default_label

    @classmethod
    def from_name(cls, name: str) -> "ProviderVariant":
        """Look up a variant by display name or member name, ignoring case."""
        key = (name or "").strip().lower()
        for variant in cls:
            if key in (variant.name.lower(), variant.display_name.lower()):
                return variant
        raise ValueError(f"unknown network provider: {name!r}")


class NetworkProvider:
    """Holds an ordered list of subscribers and broadcasts messages to them."""

    def __init__(self, variant: ProviderVariant, label: Optional[str] = None) -> None:
        self._variant = variant
        self._label = variant.default_label if label is None else label
        self._subscribers: List[Subscriber] = []
        self._notifications_sent: int = 0
        self._logger = get_logger(f"netalert.provider.{variant.display_name}")

    @property
    def variant(self) -> ProviderVariant:
        return self._variant

    @property
    def display_name(self) -> str:
        return self._variant.display_name

    @property
    def label(self) -> str:
        return self._label

    @property
    def subscribers(self) -> List[Subscriber]:
        """Return a copy of the subscriber list, in registration order."""
        return list(self._subscribers)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def notifications_sent(self) -> int:
        return self._notifications_sent

    def set_label(self, label: str) -> None:
        self._label = label

    def get_label(self) -> str:
        return self._label

    def register(self, subscriber: Subscriber) -> None:
        """Append a subscriber. The same subscriber may be registered more than once."""
        self._subscribers.append(subscriber)
        if hasattr(subscriber, "on_register"):
            subscriber.on_register(self)

    def deregister(self, subscriber: Subscriber) -> None:
        """Remove the first registration equal to subscriber; do nothing if there is none."""
        try:
            self._subscribers.remove(subscriber)
        except ValueError:
            return
        if hasattr(subscriber, "on_deregister"):
            subscriber.on_deregister(self)

    def notify_all(self, message: str) -> Notification:
        """Deliver message to every subscriber in registration order and return the notification sent."""
        notification = Notification(
            provider_name=self.display_name,
            label=self._label,
            body=message,
        )
        subscribers = list(self._subscribers)
        self._logger.info(
            "broadcasting",
            extra={**notification.to_dict(), "subscriber_count": len(subscribers)},
        )
        self._notifications_sent += 1
        text = notification.text
        for subscriber in subscribers:
            try:
                subscriber.receive(text)
            except Exception as e:
                self._logger.exception(
                    "delivery_failed",
                    extra={
                        "subscriber_id": getattr(subscriber, "subscriber_id", repr(subscriber)),
                        "notification_id": notification.notification_id,
                        "error": str(e),
                    },
                )
        return notification

    def __repr__(self) -> str:
        return (
            f"NetworkProvider(variant={self.display_name!r}, label={self._label!r}, "
            f"subscribers={len(self._subscribers)})"
        )


def telnet() -> NetworkProvider:
    return NetworkProvider(ProviderVariant.TELNET)


def vodahouse() -> NetworkProvider:
    return NetworkProvider(ProviderVariant.VODAHOUSE)


def mnetwork() -> NetworkProvider:
    return NetworkProvider(ProviderVariant.MNETWORK)


def cmac() -> NetworkProvider:
    return NetworkProvider(ProviderVariant.CMAC)
