"""Booking payload validation, status transitions and date views."""
from typing import List, Optional

from ..errors import ValidationFailed
from ..models import BookingStatus
from ..stores.base import BookingStore, Record
from .base import failure_scope

BOOKING_STATUSES = tuple(member.value for member in BookingStatus)
REQUIRED_BOOKING_FIELDS = ("userId", "groupName", "groupType", "groupSize", "date")


class BookingController:
    def __init__(self, store: BookingStore) -> None:
        self.store = store

    def get_all_bookings(self) -> List[Record]:
        with failure_scope("get all bookings"):
            return self.store.get_all_bookings()

    def get_booking_by_id(self, booking_id: str) -> Optional[Record]:
        with failure_scope("get booking by ID"):
            return self.store.get_booking_by_id(booking_id)

    def get_bookings_by_user_id(self, user_id: str) -> List[Record]:
        with failure_scope("get bookings by user ID"):
            return self.store.get_bookings_by_user_id(user_id)

    def get_bookings_by_date(self, date: str) -> List[Record]:
        with failure_scope("get bookings by date"):
            return self.store.get_bookings_by_date(date)

    def get_bookings_by_status(self, status: str) -> List[Record]:
        with failure_scope("get bookings by status"):
            return self.store.get_bookings_by_status(status)

    def create_booking(self, data: Record) -> Record:
        operation = "create booking"
        with failure_scope(operation):
            if any(not data.get(field) for field in REQUIRED_BOOKING_FIELDS):
                raise ValidationFailed(operation, "Missing required booking fields")
            return self.store.create_booking(data)

    def update_booking(self, booking_id: str, patch: Record) -> Optional[Record]:
        with failure_scope("update booking"):
            return self.store.update_booking(booking_id, patch)

    def update_booking_status(self, booking_id: str, status: str) -> Optional[Record]:
        operation = "update booking status"
        with failure_scope(operation):
            if status not in BOOKING_STATUSES:
                raise ValidationFailed(
                    operation, "Invalid status. Must be pending, confirmed, cancelled, or completed"
                )
            return self.update_booking(booking_id, {"status": status})

    def delete_booking(self, booking_id: str) -> Optional[Record]:
        with failure_scope("delete booking"):
            return self.store.delete_booking(booking_id)

    def get_available_dates(self, start_date: str, end_date: str) -> List[str]:
        """Distinct booking dates within ``[start_date, end_date]``.

        ``YYYY-MM-DD`` strings compare in calendar order, so plain string
        comparison is used; malformed bounds give odd results but never raise.
        Bookings of every status are considered.
        """

        start, end = str(start_date), str(end_date)
        with failure_scope("get available dates"):
            dates: List[str] = []
            for booking in self.store.get_all_bookings():
                date = booking.get("date")
                if isinstance(date, str) and start <= date <= end and date not in dates:
                    dates.append(date)
            return dates
