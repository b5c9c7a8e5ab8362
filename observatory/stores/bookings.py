"""Booking records backed by SQLAlchemy."""
from typing import List, Optional

from sqlalchemy import select

from ..models import Booking
from .base import Record
from .sql import SqlStore, columns_from, isoformat, parse_timestamp

BOOKING_FIELDS = {
    "userId": "user_id",
    "role": "role",
    "groupName": "group_name",
    "groupType": "group_type",
    "groupSize": "group_size",
    "interests": "interests",
    "otherInfo": "other_info",
    "date": "date",
    "status": "status",
    "confirmed": "confirmed",
}


def booking_record(booking: Booking) -> Record:
    record: Record = {"id": booking.id}
    for field, column in BOOKING_FIELDS.items():
        record[field] = getattr(booking, column)
    record["interests"] = list(booking.interests or [])
    record["confirmed"] = list(booking.confirmed or [])
    record["created"] = isoformat(booking.created)
    return record


class SqlBookingStore(SqlStore):
    def _list(self, *criteria) -> List[Record]:
        query = select(Booking).where(*criteria).order_by(Booking.created, Booking.id)
        return [booking_record(row) for row in self.db.scalars(query).all()]

    def get_all_bookings(self) -> List[Record]:
        return self._list()

    def get_booking_by_id(self, booking_id: str) -> Optional[Record]:
        booking = self.db.get(Booking, booking_id)
        return booking_record(booking) if booking else None

    def get_bookings_by_user_id(self, user_id: str) -> List[Record]:
        return self._list(Booking.user_id == user_id)

    def get_bookings_by_date(self, date: str) -> List[Record]:
        return self._list(Booking.date == date)

    def get_bookings_by_status(self, status: str) -> List[Record]:
        return self._list(Booking.status == status)

    def create_booking(self, data: Record) -> Record:
        booking = Booking(**columns_from(data, BOOKING_FIELDS))
        if data.get("created"):
            booking.created = parse_timestamp(data["created"])
        self._save(booking)
        return booking_record(booking)

    def update_booking(self, booking_id: str, patch: Record) -> Optional[Record]:
        booking = self.db.get(Booking, booking_id)
        if booking is None:
            return None
        for column, value in columns_from(patch, BOOKING_FIELDS).items():
            setattr(booking, column, value)
        self._save(booking)
        return booking_record(booking)

    def delete_booking(self, booking_id: str) -> Optional[Record]:
        booking = self.db.get(Booking, booking_id)
        if booking is None:
            return None
        record = booking_record(booking)
        self._remove(booking)
        return record
