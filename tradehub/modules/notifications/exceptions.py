"""Notification domain specific exceptions."""


class NotificationError(Exception):
    """Base class for notification errors."""


class NotificationValidationError(NotificationError):
    """Raised when a notification is missing fields or has no usable targets."""
