"""Outage notifications from network providers to their users (in-memory Observer pattern)."""

from netalert.notification import Notification
from netalert.subscriber import Subscriber
from netalert.user import User
from netalert.provider import (
    NetworkProvider,
    ProviderVariant,
    cmac,
    mnetwork,
    telnet,
    vodahouse,
)

__all__ = [
    "Notification",
    "Subscriber",
    "User",
    "NetworkProvider",
    "ProviderVariant",
    "telnet",
    "vodahouse",
    "mnetwork",
    "cmac",
]
