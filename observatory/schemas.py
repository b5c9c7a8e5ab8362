"""Pydantic request and response schemas for the HTTP API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .models import BookingStatus, RoleEnum, UserStatus

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    image: Optional[str] = None


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    image: Optional[str] = None
    role: Optional[RoleEnum] = None


class UserStatusUpdate(BaseModel):
    status: UserStatus


class UserRead(BaseModel):
    id: str
    name: str
    email: str
    image: Optional[str] = None
    role: str
    status: str
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class BookingCreate(BaseModel):
    groupName: str = Field(..., min_length=1, max_length=200)
    groupType: str = Field(..., min_length=1, max_length=50)
    groupSize: int = Field(..., gt=0)
    interests: List[str] = Field(default_factory=list)
    otherInfo: str = ""
    date: str = Field(..., pattern=DATE_PATTERN)


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingRead(BaseModel):
    id: str
    userId: str
    role: Optional[str] = None
    groupName: str
    groupType: str
    groupSize: int
    interests: List[str] = Field(default_factory=list)
    otherInfo: Optional[str] = ""
    date: str
    status: str
    confirmed: List[str] = Field(default_factory=list)
    created: Optional[str] = None


class BookingCreated(BaseModel):
    success: bool = True
    booking: BookingRead


class DateList(BaseModel):
    dates: List[str]


class HostingAvailabilityUpdate(BaseModel):
    dates: List[str] = Field(default_factory=list)


class ObsAvailabilityUpdate(BaseModel):
    openDates: List[str] = Field(default_factory=list)


class OpenDates(BaseModel):
    openDates: List[str]


class GroupRequirement(BaseModel):
    model_config = ConfigDict(extra="allow")

    groupMin: int
    groupMax: int


class ObsSettings(BaseModel):
    model_config = ConfigDict(extra="allow")

    bookingsActive: bool = True
    requirements: List[GroupRequirement] = Field(default_factory=list)


class Success(BaseModel):
    success: bool = True
