"""Session handling shared by the SQLAlchemy-backed stores."""
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class SqlStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _save(self, instance: Any) -> None:
        self.db.add(instance)
        self._commit()
        self.db.refresh(instance)

    def _remove(self, instance: Any) -> None:
        self.db.delete(instance)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise


def columns_from(data: Mapping[str, Any], fields: Mapping[str, str]) -> Dict[str, Any]:
    """Translate document field names to column names, dropping unknown keys."""

    return {column: data[field] for field, column in fields.items() if field in data}


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).replace(tzinfo=None)
