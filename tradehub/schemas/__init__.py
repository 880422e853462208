"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str
    details: Optional[str] = None


class AdminCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)


class AdminResponse(BaseModel):
    id: str
    username: str
    is_active: bool
    created_by_id: str
    created_by_username: str
    last_seen_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WalletResponse(BaseModel):
    balance: Decimal
    topup: Decimal
    profits: Decimal

    model_config = ConfigDict(from_attributes=True)


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: Optional[str] = Field(default=None, max_length=100)
    full_name: Optional[str] = Field(default=None, max_length=120)


class UserResponse(BaseModel):
    id: str
    username: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    wallet: WalletResponse
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserListResponse(BaseModel):
    users: list[UserResponse]


class TopupRequest(BaseModel):
    # Optional here; TopupService checks presence and range.
    amount: Optional[Decimal] = Field(default=None, description="Amount to credit, at most two decimal places")
    description: Optional[str] = None


class TopupResponse(BaseModel):
    id: str
    user_id: str
    amount: Decimal
    description: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TopupResultResponse(BaseModel):
    user: UserResponse
    topup: TopupResponse


class TopupListResponse(BaseModel):
    topups: list[TopupResponse]


class PlanCreate(BaseModel):
    name: str = Field(..., max_length=100)
    min_amount: Decimal
    max_amount: Decimal
    roi_percentage: Decimal
    duration_days: int


class PlanResponse(BaseModel):
    id: str
    name: str
    min_amount: Decimal
    max_amount: Decimal
    roi_percentage: Decimal
    duration_days: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NotificationCreate(BaseModel):
    message: str
    type: str = Field(..., max_length=20)
    expiry_date: datetime
    targets: list[str] = Field(..., description='User ids, or "all" for everyone')


class NotificationResponse(BaseModel):
    id: str
    message: str
    type: str
    expiry_date: datetime
    targets: list[str]
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]


class InvestmentResponse(BaseModel):
    id: str
    user_id: str
    plan_id: str
    amount: Decimal
    status: str
    expiry_date: datetime
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class InvestmentListResponse(BaseModel):
    investments: list[InvestmentResponse]


class ExpireInvestmentsResponse(BaseModel):
    updated: int
