"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from tradehub.infrastructure.database.base import Base

MONEY = Numeric(18, 2)


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_by_id = Column(String(36), nullable=False)
    created_by_username = Column(String(50), nullable=False)
    last_seen_at = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True)
    full_name = Column(String(120))
    wallet_balance = Column(MONEY, nullable=False, default=0)
    wallet_topup = Column(MONEY, nullable=False, default=0)
    wallet_profits = Column(MONEY, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    topups = relationship("Topup", back_populates="user")
    investments = relationship("Investment", back_populates="user")

    __table_args__ = (
        CheckConstraint("wallet_balance >= 0", name="wallet_balance_non_negative"),
        CheckConstraint("wallet_topup >= 0", name="wallet_topup_non_negative"),
        CheckConstraint("wallet_profits >= 0", name="wallet_profits_non_negative"),
    )


class Topup(Base):
    __tablename__ = "topups"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(MONEY, nullable=False)
    description = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="topups")

    __table_args__ = (
        CheckConstraint("amount > 0", name="topup_amount_positive"),
    )


class Plan(Base):
    __tablename__ = "plans"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), unique=True, nullable=False)
    min_amount = Column(MONEY, nullable=False)
    max_amount = Column(MONEY, nullable=False)
    roi_percentage = Column(Numeric(7, 2), nullable=False)
    duration_days = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("min_amount <= max_amount", name="plan_limits_ordered"),
    )


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    message = Column(Text, nullable=False)
    type = Column(String(20), nullable=False)
    expiry_date = Column(DateTime(timezone=True), nullable=False, index=True)
    targets = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Investment(Base):
    __tablename__ = "investments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    plan_id = Column(String(36), ForeignKey("plans.id"), nullable=False, index=True)
    amount = Column(MONEY, nullable=False)
    status = Column(String(20), nullable=False, default="active", index=True)  # active, expired
    expiry_date = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="investments")
    plan = relationship("Plan")
