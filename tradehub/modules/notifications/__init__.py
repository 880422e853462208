"""Notification exports"""

from .exceptions import NotificationError, NotificationValidationError
from .models import BROADCAST_TARGET, Notification, NotificationCreateInput
from .service import NotificationService

__all__ = [
    "BROADCAST_TARGET",
    "Notification",
    "NotificationCreateInput",
    "NotificationService",
    "NotificationError",
    "NotificationValidationError",
]
