"""Top-up domain exports"""

from .exceptions import NotFoundError, PersistenceError, TopupError, ValidationError
from .models import TopupFailure, TopupRecord, TopupResult
from .service import TopupService

__all__ = [
    "TopupFailure",
    "TopupRecord",
    "TopupResult",
    "TopupService",
    "TopupError",
    "ValidationError",
    "NotFoundError",
    "PersistenceError",
]
