"""Booking endpoints: requests, confirmations and date lookups."""
import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..controllers import BookingController, SettingsController
from ..dependencies import allow_roles, get_booking_controller, get_current_user, get_settings_controller, is_admin
from ..models import OBS_SETTINGS_KEY, BookingStatus, RoleEnum
from ..schemas import BookingCreate, BookingCreated, BookingRead, BookingStatusUpdate, DateList, Success
from ..stores import Record

router = APIRouter(prefix="/api/bookings", tags=["bookings"])

# Group type whose requests skip the approval step.
MEMBER_GROUP_TYPE = "Member"
# Statuses that take a night off the calendar.
HOLDING_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)
CONFIRMING_ROLES = (RoleEnum.MEMBER, RoleEnum.LEADER, RoleEnum.ADMIN)
LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _parse_group_size(raw: Optional[str]) -> int:
    """Read the leading integer of ``raw`` (``"12abc"`` and ``"12.5"`` give 12); 0 when there is none."""

    match = LEADING_INTEGER.match(raw or "")
    return int(match.group(1)) if match else 0


def _find_requirement(requirements: List[dict], group_size: int) -> Optional[dict]:
    for row in requirements:
        try:
            if row["groupMin"] <= group_size <= row["groupMax"]:
                return row
        except (KeyError, TypeError):
            continue
    return None


@router.get("", response_model=List[BookingRead])
def list_bookings(
    current_user: Record = Depends(get_current_user),
    bookings: BookingController = Depends(get_booking_controller),
) -> List[Record]:
    if is_admin(current_user):
        return bookings.get_all_bookings()
    return bookings.get_bookings_by_user_id(current_user["id"])


@router.post("", response_model=BookingCreated)
def create_booking(
    booking_in: BookingCreate,
    current_user: Record = Depends(get_current_user),
    bookings: BookingController = Depends(get_booking_controller),
) -> dict:
    booking_status = BookingStatus.PENDING
    if booking_in.groupType == MEMBER_GROUP_TYPE:
        booking_status = BookingStatus.CONFIRMED
    booking = bookings.create_booking(
        {
            "userId": current_user["id"],
            "role": current_user.get("role") or RoleEnum.GUEST.value,
            **booking_in.model_dump(),
            "status": booking_status.value,
        }
    )
    return {"success": True, "booking": booking}


@router.patch("", response_model=Success)
def confirm_booking(
    booking_id: str = Query(..., alias="id"),
    current_user: Record = Depends(allow_roles(*CONFIRMING_ROLES)),
    bookings: BookingController = Depends(get_booking_controller),
) -> dict:
    booking = bookings.get_booking_by_id(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")

    confirmed = list(booking.get("confirmed") or [])
    if current_user["id"] not in confirmed:
        confirmed.append(current_user["id"])
        bookings.update_booking(booking_id, {"confirmed": confirmed})
    return {"success": True}


@router.delete("", response_model=Success)
def delete_booking(
    booking_id: str = Query(..., alias="id"),
    current_user: Record = Depends(get_current_user),
    bookings: BookingController = Depends(get_booking_controller),
) -> dict:
    booking = bookings.get_booking_by_id(booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    if not is_admin(current_user) and booking["userId"] != current_user["id"]:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")

    bookings.delete_booking(booking_id)
    return {"success": True}


@router.patch("/{booking_id}/status", response_model=BookingRead)
def update_booking_status(
    booking_id: str,
    status_in: BookingStatusUpdate,
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    bookings: BookingController = Depends(get_booking_controller),
) -> Record:
    booking = bookings.update_booking_status(booking_id, status_in.status.value)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.get("/booked-dates", response_model=DateList)
def booked_dates(
    start: str = Query(...),
    end: str = Query(...),
    _: Record = Depends(get_current_user),
    bookings: BookingController = Depends(get_booking_controller),
) -> dict:
    return {"dates": bookings.get_available_dates(start, end)}


@router.get("/available-dates", response_model=DateList)
def available_dates(
    group_size: Optional[str] = Query(None, alias="groupSize"),
    group_type: Optional[str] = Query(None, alias="groupType"),
    bookings: BookingController = Depends(get_booking_controller),
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> dict:
    size = _parse_group_size(group_size)
    if not size or not group_type:
        return {"dates": []}

    availabilities = settings_controller.get_obs_availability()
    open_dates = (availabilities[0].get("dates") or []) if availabilities else []

    obs_settings = settings_controller.get_setting_by_key(OBS_SETTINGS_KEY)
    requirements = ((obs_settings or {}).get("value") or {}).get("requirements") or []

    unavailable = {
        booking["date"]
        for booking in bookings.get_all_bookings()
        if booking.get("status") in HOLDING_STATUSES
    }
    available = [date for date in open_dates if date not in unavailable]

    if group_type == MEMBER_GROUP_TYPE:
        return {"dates": available}
    if _find_requirement(requirements, size) is None:
        return {"dates": []}
    # TODO: narrow to nights with enough hosts once hosting availability is matched against requirement rows
    return {"dates": available}
