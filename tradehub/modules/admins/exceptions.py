"""Admin domain specific exceptions."""


class AdminError(Exception):
    """Base class for admin domain errors."""


class AdminValidationError(AdminError):
    """Raised when required admin fields are missing."""


class AdminAlreadyExistsError(AdminError):
    """Raised when attempting to create an admin with duplicate username."""
