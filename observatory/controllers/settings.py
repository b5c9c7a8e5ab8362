"""Configuration key/value pairs and availability calendars."""
from typing import Any, List, Optional

from ..errors import ValidationFailed
from ..models import AvailabilityType
from ..stores.base import Record, SettingsStore
from .base import failure_scope

AVAILABILITY_TYPES = tuple(member.value for member in AvailabilityType)


class SettingsController:
    def __init__(self, store: SettingsStore) -> None:
        self.store = store

    def get_all_settings(self) -> List[Record]:
        with failure_scope("get all settings"):
            return self.store.get_all_settings()

    def get_setting_by_key(self, key: str) -> Optional[Record]:
        with failure_scope("get setting by key"):
            return self.store.get_setting_by_key(key)

    def create_or_update_setting(self, key: str, value: Any, description: str = "") -> Record:
        operation = "create/update setting"
        with failure_scope(operation):
            if not key:
                raise ValidationFailed(operation, "Setting key is required")
            return self.store.create_or_update_setting(key, value, description)

    def delete_setting(self, key: str) -> Optional[Record]:
        with failure_scope("delete setting"):
            return self.store.delete_setting(key)

    def get_availability(self, type: str, user_id: Optional[str] = None) -> List[Record]:
        with failure_scope("get availability"):
            return self.store.get_availability(type, user_id)

    def get_all_availabilities_by_type(self, type: str) -> List[Record]:
        with failure_scope("get availabilities by type"):
            return self.store.get_all_availabilities_by_type(type)

    def create_or_update_availability(
        self, type: str, user_id: str, dates: List[str], role: Optional[str] = None
    ) -> Record:
        operation = "create/update availability"
        with failure_scope(operation):
            if not type or not user_id:
                raise ValidationFailed(operation, "Type and userId are required")
            if type not in AVAILABILITY_TYPES:
                raise ValidationFailed(operation, "Invalid type. Must be hosting or obs")
            return self.store.create_or_update_availability(type, user_id, dates, role)

    def delete_availability(self, type: str, user_id: str) -> Optional[Record]:
        with failure_scope("delete availability"):
            return self.store.delete_availability(type, user_id)

    def get_obs_availability(self) -> List[Record]:
        with failure_scope("get observatory availability"):
            return self.get_all_availabilities_by_type(AvailabilityType.OBS.value)

    def update_obs_availability(self, user_id: str, dates: List[str], role: Optional[str] = None) -> Record:
        with failure_scope("update observatory availability"):
            return self.create_or_update_availability(AvailabilityType.OBS.value, user_id, dates, role)

    def get_hosting_availability(self) -> List[Record]:
        with failure_scope("get hosting availability"):
            return self.get_all_availabilities_by_type(AvailabilityType.HOSTING.value)

    def update_hosting_availability(self, user_id: str, dates: List[str], role: Optional[str] = None) -> Record:
        with failure_scope("update hosting availability"):
            return self.create_or_update_availability(AvailabilityType.HOSTING.value, user_id, dates, role)
