"""Store interfaces the controllers are written against.

Records cross this boundary as plain ``dict`` objects keyed with the document
field names (``userId``, ``groupName``...). A miss is ``None`` or ``[]``; any
other failure propagates as the backend's own exception.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

Record = Dict[str, Any]


class SettingsStore(Protocol):
    def get_all_settings(self) -> List[Record]: ...

    def get_setting_by_key(self, key: str) -> Optional[Record]: ...

    def create_or_update_setting(self, key: str, value: Any, description: str = "") -> Record: ...

    def delete_setting(self, key: str) -> Optional[Record]: ...

    def get_availability(self, type: str, user_id: Optional[str] = None) -> List[Record]: ...

    def get_all_availabilities_by_type(self, type: str) -> List[Record]: ...

    def create_or_update_availability(
        self, type: str, user_id: str, dates: List[str], role: Optional[str] = None
    ) -> Record: ...

    def delete_availability(self, type: str, user_id: str) -> Optional[Record]: ...


class BookingStore(Protocol):
    def get_all_bookings(self) -> List[Record]: ...

    def get_booking_by_id(self, booking_id: str) -> Optional[Record]: ...

    def get_bookings_by_user_id(self, user_id: str) -> List[Record]: ...

    def get_bookings_by_date(self, date: str) -> List[Record]: ...

    def get_bookings_by_status(self, status: str) -> List[Record]: ...

    def create_booking(self, data: Record) -> Record: ...

    def update_booking(self, booking_id: str, patch: Record) -> Optional[Record]: ...

    def delete_booking(self, booking_id: str) -> Optional[Record]: ...


class UserStore(Protocol):
    def get_all_users(self) -> List[Record]: ...

    def get_user_by_id(self, user_id: str) -> Optional[Record]: ...

    def get_user_by_email(self, email: str) -> Optional[Record]: ...

    def create_user(self, data: Record) -> Record: ...

    def update_user(self, user_id: str, patch: Record) -> Optional[Record]: ...

    def delete_user(self, user_id: str) -> Optional[Record]: ...
