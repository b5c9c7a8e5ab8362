from .bookings import BookingController
from .settings import SettingsController
from .users import UserController

__all__ = ["BookingController", "SettingsController", "UserController"]
