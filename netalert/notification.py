"""Notification class for a provider broadcast and its display text."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Notification:
    """Represents one message broadcast by a network provider."""

    provider_name: str
    label: Optional[str]
    body: str
    notification_id: Optional[str] = None
    timestamp: Optional[datetime] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc)
        if self.notification_id is None:
            self.notification_id = f"{self.provider_name}_{id(self)}_{self.timestamp.timestamp()}"

    @property
    def text(self) -> str:
        """What subscribers receive."""
        return f"Notification from {self.provider_name} (Color: {self.label}): {self.body}"

    def to_dict(self) -> dict:
        """Serialize notification for logging."""
        return {
            "notification_id": self.notification_id,
            "provider_name": self.provider_name,
            "label": self.label,
            "body": self.body,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

    def __str__(self) -> str:
        return self.text
