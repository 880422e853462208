"""User domain services and models."""

from .exceptions import UserAlreadyExistsError, UserError
from .models import User, UserCreateInput, Wallet
from .service import UserService

__all__ = [
    "User",
    "UserCreateInput",
    "Wallet",
    "UserService",
    "UserError",
    "UserAlreadyExistsError",
]
