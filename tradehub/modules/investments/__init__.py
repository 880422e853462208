"""Investment exports"""

from .models import STATUS_ACTIVE, STATUS_EXPIRED, Investment
from .service import InvestmentService

__all__ = [
    "Investment",
    "InvestmentService",
    "STATUS_ACTIVE",
    "STATUS_EXPIRED",
]
