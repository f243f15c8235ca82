"""Concrete Subscriber: a user of a network provider."""

from typing import Optional

from netalert.subscriber import Subscriber


class User(Subscriber):
    """Subscriber that prints every message it receives to stdout."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name
        self._label: Optional[str] = None

    @property
    def label(self) -> Optional[str]:
        return self._label

    def set_label(self, label: str) -> None:
        """Store the identification label of the provider this user follows."""
        self._label = label

    def get_label(self) -> Optional[str]:
        return self._label

    def receive(self, message: str) -> None:
        print(f"{self.name} received a message: {message}")
        self._logger.debug(
            "message_received",
            extra={"subscriber_id": self.subscriber_id, "label": self._label},
        )
