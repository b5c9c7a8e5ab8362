from .base import BookingStore, Record, SettingsStore, UserStore
from .bookings import SqlBookingStore
from .settings import SqlSettingsStore
from .users import SqlUserStore

__all__ = [
    "BookingStore",
    "Record",
    "SettingsStore",
    "SqlBookingStore",
    "SqlSettingsStore",
    "SqlUserStore",
    "UserStore",
]
