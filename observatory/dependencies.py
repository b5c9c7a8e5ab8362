"""FastAPI dependencies wiring controllers to a request-scoped session."""
from typing import Callable

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from .auth import decode_token
from .controllers import BookingController, SettingsController, UserController
from .database import get_db
from .models import RoleEnum, UserStatus
from .stores import Record, SqlBookingStore, SqlSettingsStore, SqlUserStore

oauth_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def get_settings_controller(db: Session = Depends(get_db)) -> SettingsController:
    return SettingsController(SqlSettingsStore(db))


def get_booking_controller(db: Session = Depends(get_db)) -> BookingController:
    return BookingController(SqlBookingStore(db))


def get_user_controller(db: Session = Depends(get_db)) -> UserController:
    return UserController(SqlUserStore(db))


def get_current_user(
    token: str = Depends(oauth_scheme),
    users: UserController = Depends(get_user_controller),
) -> Record:
    payload = decode_token(token)
    user_id: str | None = payload.get("sub")
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing subject in token")
    user = users.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    if user.get("status") != UserStatus.ACTIVE.value:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is not active")
    return user


def allow_roles(*roles: RoleEnum) -> Callable[[Record], Record]:
    allowed = tuple(role.value for role in roles)

    def dependency(current_user: Record = Depends(get_current_user)) -> Record:
        if current_user.get("role") not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return current_user

    return dependency


def is_admin(user: Record) -> bool:
    return user.get("role") == RoleEnum.ADMIN.value
