"""Admin domain services and models."""

from .exceptions import AdminAlreadyExistsError, AdminError, AdminValidationError
from .models import Admin, AdminCreateInput
from .service import AdminService

__all__ = [
    "Admin",
    "AdminCreateInput",
    "AdminService",
    "AdminError",
    "AdminAlreadyExistsError",
    "AdminValidationError",
]
