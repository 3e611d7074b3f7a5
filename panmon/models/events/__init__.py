"""Event models."""

from panmon.models.events.notification import Notification

__all__ = ["Notification"]
