"""Investment plan specific exceptions."""


class PlanError(Exception):
    """Base class for plan domain errors."""


class PlanValidationError(PlanError):
    """Raised when plan fields are missing or inconsistent."""


class PlanAlreadyExistsError(PlanError):
    """Raised when a plan with the same name already exists."""
