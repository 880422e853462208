"""Investment plan exports"""

from .exceptions import PlanAlreadyExistsError, PlanError, PlanValidationError
from .models import Plan, PlanCreateInput
from .service import PlanService

__all__ = [
    "Plan",
    "PlanCreateInput",
    "PlanService",
    "PlanError",
    "PlanAlreadyExistsError",
    "PlanValidationError",
]
