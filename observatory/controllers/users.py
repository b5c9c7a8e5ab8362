"""Account lifecycle and authentication.

Every user record handed back from this controller has its ``password``
field removed.
"""
from typing import Iterable, List, Optional

from ..auth import PasswordHasher, pwd_hasher
from ..errors import ValidationFailed
from ..models import UserStatus
from ..stores.base import Record, UserStore
from .base import failure_scope

USER_STATUSES = tuple(member.value for member in UserStatus)


def redact(user: Optional[Record]) -> Optional[Record]:
    if user is None:
        return None
    return {field: value for field, value in user.items() if field != "password"}


def redact_all(users: Iterable[Record]) -> List[Record]:
    return [redact(user) for user in users]


class UserController:
    def __init__(self, store: UserStore, hasher: Optional[PasswordHasher] = None) -> None:
        self.store = store
        self.hasher = hasher or pwd_hasher

    def get_all_users(self) -> List[Record]:
        with failure_scope("get all users"):
            return redact_all(self.store.get_all_users())

    def get_user_by_id(self, user_id: str) -> Optional[Record]:
        with failure_scope("get user by ID"):
            return redact(self.store.get_user_by_id(user_id))

    def get_user_by_email(self, email: str) -> Optional[Record]:
        with failure_scope("get user by email"):
            return redact(self.store.get_user_by_email(email))

    def authenticate_user(self, email: str, password: str) -> Optional[Record]:
        operation, prefix = "authenticate user", "Authentication failed"
        with failure_scope(operation, prefix):
            user = self.store.get_user_by_email(email)
            if not user:
                return None
            if user.get("status") != UserStatus.ACTIVE.value:
                raise ValidationFailed(operation, "User account is not active", prefix=prefix)
            if not self.hasher.verify(password, user.get("password")):
                return None
            return redact(user)

    def create_user(self, data: Record) -> Record:
        operation = "create user"
        with failure_scope(operation):
            if not data.get("name") or not data.get("email"):
                raise ValidationFailed(operation, "Name and email are required")
            if self.store.get_user_by_email(data["email"]):
                raise ValidationFailed(operation, "User with this email already exists")
            record = dict(data)
            if record.get("password"):
                record["password"] = self.hasher.hash(record["password"])
            else:
                record.pop("password", None)
            return redact(self.store.create_user(record))

    def update_user(self, user_id: str, patch: Record) -> Optional[Record]:
        operation = "update user"
        with failure_scope(operation):
            current = self.store.get_user_by_id(user_id)
            if not current:
                return None
            changes = dict(patch)
            email = changes.get("email")
            if email and email != current.get("email") and self.store.get_user_by_email(email):
                raise ValidationFailed(operation, "Email already exists")
            if changes.get("password"):
                changes["password"] = self.hasher.hash(changes["password"])
            else:
                changes.pop("password", None)
            return redact(self.store.update_user(user_id, changes))

    def delete_user(self, user_id: str) -> Optional[Record]:
        with failure_scope("delete user"):
            return redact(self.store.delete_user(user_id))

    def change_user_status(self, user_id: str, status: str) -> Optional[Record]:
        operation = "change user status"
        with failure_scope(operation):
            if status not in USER_STATUSES:
                raise ValidationFailed(operation, "Invalid status. Must be active, inactive, or suspended")
            return redact(self.store.update_user(user_id, {"status": status}))

    def get_users_by_role(self, role: str) -> List[Record]:
        with failure_scope("get users by role"):
            return redact_all(user for user in self.store.get_all_users() if user.get("role") == role)
