"""Availability calendars and observatory settings endpoints."""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..controllers import SettingsController
from ..dependencies import allow_roles, get_current_user, get_settings_controller
from ..models import OBS_SETTINGS_DESCRIPTION, OBS_SETTINGS_KEY, SYSTEM_USER_ID, AvailabilityType, RoleEnum
from ..schemas import HostingAvailabilityUpdate, ObsAvailabilityUpdate, ObsSettings, OpenDates, Success
from ..stores import Record

router = APIRouter(prefix="/api", tags=["availability"])

DEFAULT_OBS_SETTINGS: Dict[str, Any] = {"bookingsActive": True, "requirements": []}


@router.get("/hosting-availability")
def get_hosting_availability(
    current_user: Record = Depends(get_current_user),
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> Record:
    availabilities = settings_controller.get_availability(AvailabilityType.HOSTING.value, current_user["id"])
    return availabilities[0] if availabilities else {}


@router.post("/hosting-availability", response_model=Success)
def update_hosting_availability(
    availability_in: HostingAvailabilityUpdate,
    current_user: Record = Depends(get_current_user),
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> dict:
    settings_controller.update_hosting_availability(
        current_user["id"], availability_in.dates, current_user.get("role")
    )
    return {"success": True}


@router.get("/obs-availability", response_model=OpenDates)
def get_obs_availability(
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> dict:
    availabilities = settings_controller.get_obs_availability()
    open_dates = (availabilities[0].get("dates") or []) if availabilities else []
    return {"openDates": open_dates}


@router.post("/obs-availability", response_model=Success)
def update_obs_availability(
    availability_in: ObsAvailabilityUpdate,
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> dict:
    settings_controller.update_obs_availability(SYSTEM_USER_ID, availability_in.openDates, RoleEnum.ADMIN.value)
    return {"success": True}


@router.get("/obs-availability-settings")
def get_obs_settings(
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> Any:
    setting = settings_controller.get_setting_by_key(OBS_SETTINGS_KEY)
    return setting["value"] if setting else dict(DEFAULT_OBS_SETTINGS)


@router.post("/obs-availability-settings", response_model=Success)
def update_obs_settings(
    settings_in: ObsSettings,
    _: Record = Depends(allow_roles(RoleEnum.ADMIN)),
    settings_controller: SettingsController = Depends(get_settings_controller),
) -> dict:
    settings_controller.create_or_update_setting(
        OBS_SETTINGS_KEY, settings_in.model_dump(), OBS_SETTINGS_DESCRIPTION
    )
    return {"success": True}
