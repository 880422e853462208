"""User domain specific exceptions."""


class UserError(Exception):
    """Base class for user domain errors."""


class UserAlreadyExistsError(UserError):
    """Raised when the username or email is already registered."""
