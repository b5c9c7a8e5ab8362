"""Settings and availability calendars backed by SQLAlchemy."""
from typing import Any, List, Optional

from sqlalchemy import select

from ..models import Availability, Setting
from .base import Record
from .sql import SqlStore


def setting_record(setting: Setting) -> Record:
    return {"key": setting.key, "value": setting.value, "description": setting.description}


def availability_record(availability: Availability) -> Record:
    return {
        "id": availability.id,
        "type": availability.type,
        "userId": availability.user_id,
        "dates": list(availability.dates or []),
        "role": availability.role,
    }


class SqlSettingsStore(SqlStore):
    def get_all_settings(self) -> List[Record]:
        rows = self.db.scalars(select(Setting).order_by(Setting.key)).all()
        return [setting_record(row) for row in rows]

    def get_setting_by_key(self, key: str) -> Optional[Record]:
        setting = self.db.get(Setting, key)
        return setting_record(setting) if setting else None

    def create_or_update_setting(self, key: str, value: Any, description: str = "") -> Record:
        setting = self.db.get(Setting, key)
        if setting is None:
            setting = Setting(key=key)
        setting.value = value
        setting.description = description
        self._save(setting)
        return setting_record(setting)

    def delete_setting(self, key: str) -> Optional[Record]:
        setting = self.db.get(Setting, key)
        if setting is None:
            return None
        record = setting_record(setting)
        self._remove(setting)
        return record

    def _find_availability(self, type: str, user_id: str) -> Optional[Availability]:
        return self.db.scalars(
            select(Availability).where(Availability.type == type, Availability.user_id == user_id)
        ).first()

    def get_availability(self, type: str, user_id: Optional[str] = None) -> List[Record]:
        query = select(Availability).where(Availability.type == type)
        if user_id is not None:
            query = query.where(Availability.user_id == user_id)
        return [availability_record(row) for row in self.db.scalars(query.order_by(Availability.id)).all()]

    def get_all_availabilities_by_type(self, type: str) -> List[Record]:
        return self.get_availability(type)

    def create_or_update_availability(
        self, type: str, user_id: str, dates: List[str], role: Optional[str] = None
    ) -> Record:
        availability = self._find_availability(type, user_id)
        if availability is None:
            availability = Availability(type=type, user_id=user_id)
        availability.dates = list(dates or [])
        availability.role = role
        self._save(availability)
        return availability_record(availability)

    def delete_availability(self, type: str, user_id: str) -> Optional[Record]:
        availability = self._find_availability(type, user_id)
        if availability is None:
            return None
        record = availability_record(availability)
        self._remove(availability)
        return record
