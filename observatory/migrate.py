"""One-time import of the legacy JSON data files into the database.

Usage::

    python -m observatory.migrate path/to/json-dir

Each section is idempotent: records that already exist are skipped (or, for
the observatory calendar and settings, updated in place). A failing section is
logged and the remaining sections still run.
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from . import models  # noqa: F401  (registers tables on Base)
from .database import Base, SessionLocal, engine
from .logging_config import configure_logging
from .models import (
    OBS_SETTINGS_DESCRIPTION,
    OBS_SETTINGS_KEY,
    SYSTEM_USER_ID,
    AvailabilityType,
    RoleEnum,
    UserStatus,
)
from .stores import SqlBookingStore, SqlSettingsStore, SqlUserStore

logger = logging.getLogger(__name__)

USERS_FILE = "users-db.json"
BOOKINGS_FILE = "bookings.json"
OBS_AVAILABILITY_FILE = "obs-availability.json"
OBS_SETTINGS_FILE = "obs-availability-settings.json"
HOSTING_AVAILABILITY_FILE = "hosting-availability.json"


def _load(source: Path, filename: str) -> Optional[Any]:
    path = source / filename
    if not path.exists():
        logger.info("Skipping %s: file not found", filename)
        return None
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def migrate_users(db: Session, source: Path) -> int:
    users = _load(source, USERS_FILE) or []
    store = SqlUserStore(db)
    migrated = 0
    for user in users:
        if store.get_user_by_email(user["email"]):
            logger.info("User already exists: %s", user["email"])
            continue
        store.create_user(
            {
                "name": user.get("name") or user["email"],
                "email": user["email"],
                "password": user.get("password"),
                "image": user.get("image"),
                "role": user.get("role") or RoleEnum.GUEST.value,
                "status": user.get("status") or UserStatus.ACTIVE.value,
                "createdAt": user.get("dateCreated"),
                "updatedAt": user.get("dateUpdated"),
            }
        )
        logger.info("Migrated user: %s", user["email"])
        migrated += 1
    return migrated


def migrate_bookings(db: Session, source: Path) -> int:
    bookings = _load(source, BOOKINGS_FILE) or []
    store = SqlBookingStore(db)
    migrated = 0
    for booking in bookings:
        duplicate = any(
            existing["userId"] == booking.get("userId") and existing["groupName"] == booking.get("groupName")
            for existing in store.get_bookings_by_date(booking.get("date"))
        )
        if duplicate:
            logger.info("Booking already exists: %s on %s", booking.get("groupName"), booking.get("date"))
            continue
        store.create_booking(
            {
                field: booking.get(field)
                for field in (
                    "userId", "role", "groupName", "groupType", "groupSize",
                    "interests", "otherInfo", "date", "status", "created",
                )
                if booking.get(field) is not None
            }
        )
        logger.info("Migrated booking: %s on %s", booking.get("groupName"), booking.get("date"))
        migrated += 1
    return migrated


def migrate_obs_availability(db: Session, source: Path) -> int:
    data = _load(source, OBS_AVAILABILITY_FILE) or {}
    open_dates: List[str] = data.get("openDates") or []
    if not open_dates:
        logger.info("No observatory availability to migrate")
        return 0
    SqlSettingsStore(db).create_or_update_availability(
        AvailabilityType.OBS.value, SYSTEM_USER_ID, open_dates, RoleEnum.ADMIN.value
    )
    logger.info("Migrated %d observatory open dates", len(open_dates))
    return len(open_dates)


def migrate_obs_settings(db: Session, source: Path) -> int:
    value = _load(source, OBS_SETTINGS_FILE)
    if value is None:
        return 0
    SqlSettingsStore(db).create_or_update_setting(OBS_SETTINGS_KEY, value, OBS_SETTINGS_DESCRIPTION)
    logger.info(
        "Migrated observatory settings (bookingsActive: %s, %d requirements)",
        value.get("bookingsActive"),
        len(value.get("requirements") or []),
    )
    return 1


def migrate_hosting_availability(db: Session, source: Path) -> int:
    by_user: Dict[str, Any] = _load(source, HOSTING_AVAILABILITY_FILE) or {}
    store = SqlSettingsStore(db)
    migrated = 0
    for user_id, availability in by_user.items():
        if store.get_availability(AvailabilityType.HOSTING.value, user_id):
            logger.info("Hosting availability for user %s already exists", user_id)
            continue
        dates = availability.get("dates") or []
        store.create_or_update_availability(AvailabilityType.HOSTING.value, user_id, dates, RoleEnum.MEMBER.value)
        logger.info("Migrated hosting availability for user %s (%d dates)", user_id, len(dates))
        migrated += 1
    return migrated


SECTIONS: List[Callable[[Session, Path], int]] = [
    migrate_users,
    migrate_bookings,
    migrate_obs_availability,
    migrate_obs_settings,
    migrate_hosting_availability,
]


def run_migration(db: Session, source: Path) -> Dict[str, Optional[int]]:
    """Run every section; a failed section maps to ``None`` in the result."""

    results: Dict[str, Optional[int]] = {}
    for section in SECTIONS:
        logger.info("Running %s", section.__name__)
        try:
            results[section.__name__] = section(db, source)
        except Exception:
            logger.exception("Error in %s", section.__name__)
            db.rollback()
            results[section.__name__] = None
    return results


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Import legacy JSON data files into the database.")
    parser.add_argument("source", type=Path, help="directory holding the legacy JSON files")
    parser.add_argument("--create-tables", action="store_true", help="create missing tables first")
    args = parser.parse_args(argv)

    configure_logging()
    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        results = run_migration(db, args.source)
    finally:
        db.close()

    failed = [name for name, count in results.items() if count is None]
    if failed:
        logger.error("Migration finished with failures: %s", ", ".join(failed))
        return 1
    logger.info("Migration completed successfully")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
