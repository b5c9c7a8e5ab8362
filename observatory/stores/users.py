"""User accounts backed by SQLAlchemy."""
from typing import List, Optional

from sqlalchemy import select

from ..models import User
from .base import Record
from .sql import SqlStore, columns_from, isoformat, parse_timestamp

USER_FIELDS = {
    "name": "name",
    "email": "email",
    "password": "password",
    "image": "image",
    "role": "role",
    "status": "status",
}


def user_record(user: User) -> Record:
    record: Record = {"id": user.id}
    for field, column in USER_FIELDS.items():
        record[field] = getattr(user, column)
    if record["password"] is None:
        del record["password"]
    record["createdAt"] = isoformat(user.created_at)
    record["updatedAt"] = isoformat(user.updated_at)
    return record


class SqlUserStore(SqlStore):
    def get_all_users(self) -> List[Record]:
        rows = self.db.scalars(select(User).order_by(User.created_at, User.id)).all()
        return [user_record(row) for row in rows]

    def get_user_by_id(self, user_id: str) -> Optional[Record]:
        user = self.db.get(User, user_id)
        return user_record(user) if user else None

    def get_user_by_email(self, email: str) -> Optional[Record]:
        user = self.db.scalars(select(User).where(User.email == email)).first()
        return user_record(user) if user else None

    def create_user(self, data: Record) -> Record:
        user = User(**columns_from(data, USER_FIELDS))
        for field, column in (("createdAt", "created_at"), ("updatedAt", "updated_at")):
            if data.get(field):
                setattr(user, column, parse_timestamp(data[field]))
        self._save(user)
        return user_record(user)

    def update_user(self, user_id: str, patch: Record) -> Optional[Record]:
        user = self.db.get(User, user_id)
        if user is None:
            return None
        for column, value in columns_from(patch, USER_FIELDS).items():
            setattr(user, column, value)
        self._save(user)
        return user_record(user)

    def delete_user(self, user_id: str) -> Optional[Record]:
        user = self.db.get(User, user_id)
        if user is None:
            return None
        record = user_record(user)
        self._remove(user)
        return record
