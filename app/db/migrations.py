"""Lightweight schema migrations for SQLite databases."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

# Business columns added to Restaurants after the first release, in the order
# they were introduced.
RESTAURANT_COLUMNS: dict[str, str] = {
    "email": "VARCHAR(255) NULL",
    "phone_number": "VARCHAR(32) NULL",
    "description": "TEXT NULL",
    "cuisine_type": "VARCHAR(64) NULL",
    "rating": "FLOAT NOT NULL DEFAULT 0",
    "opening_time": "TIME NOT NULL DEFAULT '00:00:00'",
    "closing_time": "TIME NOT NULL DEFAULT '00:00:00'",
    "price_range": "VARCHAR(16) NULL",
    "version": "INTEGER NOT NULL DEFAULT 1",
}


def _sqlite_column_names(connection: Connection, table_name: str) -> set[str]:
    """Return column names for a SQLite table using PRAGMA table_info."""
    rows = connection.execute(text(f'PRAGMA table_info("{table_name}");')).mappings().all()
    return {str(row["name"]) for row in rows}


def _add_missing_columns(connection: Connection, table_name: str, columns: dict[str, str]) -> list[str]:
    existing = _sqlite_column_names(connection, table_name)
    added: list[str] = []
    for column_name, ddl in columns.items():
        if column_name in existing:
            continue
        connection.execute(text(f'ALTER TABLE "{table_name}" ADD COLUMN {column_name} {ddl}'))
        added.append(column_name)
    return added


def ensure_sqlite_schema(engine: Engine) -> None:
    """Apply lightweight schema updates for legacy SQLite databases."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as connection:
        table_rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table';")).all()
        table_names: set[str] = {str(row[0]) for row in table_rows}

        if "Restaurants" in table_names:
            added = _add_missing_columns(connection, "Restaurants", RESTAURANT_COLUMNS)
            if added:
                logger.info("Upgraded Restaurants table, added columns: %s", ", ".join(added))

        if "Dishes" in table_names:
            added = _add_missing_columns(connection, "Dishes", {"version": "INTEGER NOT NULL DEFAULT 1"})
            if added:
                logger.info("Upgraded Dishes table, added columns: %s", ", ".join(added))
