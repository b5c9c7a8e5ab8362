"""SQLAlchemy models for accounts, bookings, availability calendars and settings."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from uuid import uuid4

from sqlalchemy import JSON, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


def new_id() -> str:
    return uuid4().hex


class RoleEnum(str, Enum):
    ADMIN = "admin"
    LEADER = "leader"
    MEMBER = "member"
    GUEST = "guest"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class AvailabilityType(str, Enum):
    HOSTING = "hosting"
    OBS = "obs"


# Owner of facility-wide availability rows.
SYSTEM_USER_ID = "system"

OBS_SETTINGS_KEY = "obs-availability-settings"
OBS_SETTINGS_DESCRIPTION = "Observatory availability settings including bookings status and requirements"


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    role: Mapped[str] = mapped_column(String(30), default=RoleEnum.GUEST.value, index=True)
    status: Mapped[str] = mapped_column(String(20), default=UserStatus.ACTIVE.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(32), index=True)
    role: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    group_name: Mapped[str] = mapped_column(String(200))
    group_type: Mapped[str] = mapped_column(String(50))
    group_size: Mapped[int] = mapped_column(Integer)
    interests: Mapped[List[str]] = mapped_column(JSON, default=list)
    other_info: Mapped[str] = mapped_column(Text, default="")
    date: Mapped[str] = mapped_column(String(10), index=True)
    status: Mapped[str] = mapped_column(String(20), default=BookingStatus.PENDING.value, index=True)
    confirmed: Mapped[List[str]] = mapped_column(JSON, default=list)
    created: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class Availability(Base):
    __tablename__ = "availabilities"
    __table_args__ = (UniqueConstraint("type", "user_id", name="uq_availability_type_user"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    type: Mapped[str] = mapped_column(String(20), index=True)
    user_id: Mapped[str] = mapped_column(String(32), index=True)
    dates: Mapped[List[str]] = mapped_column(JSON, default=list)
    role: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)


class Setting(Base):
    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    description: Mapped[str] = mapped_column(Text, default="")
