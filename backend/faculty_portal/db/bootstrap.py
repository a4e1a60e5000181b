from __future__ import annotations

import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from faculty_portal.core.config import get_settings
from faculty_portal.db.base import Base
from faculty_portal.db.session import engine

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: dict[str, set[str]] = {
    "lecture_templates": {"id", "day", "time", "faculty_id", "faculty_email", "subject", "room", "name"},
    "invigilation": {"id", "exam_name", "date", "time", "venue", "faculty_email", "subject"},
    "faculty_leave_master": {"id", "name", "faculty_email", "department", "cl", "el", "hpl", "od", "ccl", "lop"},
    "leave_ledger": {"id", "faculty_email", "date", "leave_type", "days", "session", "reason"},
    "activity_logs": {"id", "actor_email", "action", "entity_type", "entity_id", "details"},
}


def find_schema_gaps() -> tuple[list[str], dict[str, list[str]]]:
    missing_tables: list[str] = []
    missing_columns: dict[str, list[str]] = {}
    with engine.connect() as connection:
        inspector = inspect(connection)
        table_names = set(inspector.get_table_names())
        for table_name, columns in REQUIRED_COLUMNS.items():
            if table_name not in table_names:
                missing_tables.append(table_name)
                continue
            existing = {item["name"] for item in inspector.get_columns(table_name)}
            missing = sorted(columns - existing)
            if missing:
                missing_columns[table_name] = missing
    return missing_tables, missing_columns


def ensure_runtime_schema() -> None:
    settings = get_settings()
    try:
        if settings.database_auto_create:
            import faculty_portal.models  # noqa: F401

            Base.metadata.create_all(bind=engine)
        missing_tables, missing_columns = find_schema_gaps()
    except SQLAlchemyError:
        logger.exception("Database schema check failed during startup")
        return

    if missing_tables:
        logger.warning("Missing tables: %s (run `alembic upgrade head`)", ", ".join(missing_tables))
    for table_name, columns in missing_columns.items():
        logger.warning("Table %s is missing columns: %s", table_name, ", ".join(columns))
