"""Real-time notification change publishers."""

from .memory import InMemoryNotificationPublisher
from .postgres import PostgresNotificationPublisher

__all__ = [
    "InMemoryNotificationPublisher",
    "PostgresNotificationPublisher",
]
