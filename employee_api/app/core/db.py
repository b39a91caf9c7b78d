"""
SQLite database integration and simple migration system.

This module provides the ``Database`` class, which opens connections
to the SQLite file, runs a unit of work inside a transaction scope
(``Database.transaction``) and applies schema migrations on
application start (``Database.init_db``).  To switch to another DBMS
you would replace the connection logic and adapt the SQL in the
repositories.

Repositories never open connections themselves.  They call
``Database.current_connection`` to obtain the connection of the
transaction opened by the service layer, so that every service call
runs in exactly one transaction.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .exceptions import RecordStoreError


logger = logging.getLogger(__name__)

# Each migration is a list of single statements, run with ``execute`` so
# that the whole upgrade shares one transaction.
MIGRATIONS: list[tuple[int, list[str]]] = [
    # Migration 1: employee table
    (
        1,
        [
            """
            CREATE TABLE IF NOT EXISTS employee (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                first_name TEXT,
                last_name TEXT,
                email TEXT
            )
            """,
        ],
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is an absolute path, use it directly.  Otherwise resolve
    it relative to the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent  # project root
    return str((base_dir / db_url).resolve())


class Database:
    """Connection factory and transaction scope for the SQLite store."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = get_database_path(path)
        self._current: ContextVar[Optional[sqlite3.Connection]] = ContextVar(
            f"employee_db_connection_{id(self)}", default=None
        )

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        The connection uses a row factory to access columns by name.
        """
        try:
            conn = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            logger.exception("Could not open database %s", self.path)
            raise RecordStoreError(f"Could not open database: {exc}") from exc
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed block in one transaction.

        Commits when the block returns and rolls back when it raises;
        the exception is re-raised unchanged.  The connection is closed
        on every exit path.  A nested call joins the transaction that is
        already active instead of opening a second one.
        """
        active = self._current.get()
        if active is not None:
            yield active
            return

        conn = self.connect()
        token = self._current.set(conn)
        try:
            yield conn
        except BaseException:
            logger.warning("Rolling back transaction on %s", self.path)
            conn.rollback()
            raise
        else:
            try:
                conn.commit()
            except sqlite3.Error as exc:
                logger.exception("Commit failed on %s", self.path)
                raise RecordStoreError(f"Commit failed: {exc}") from exc
        finally:
            self._current.reset(token)
            conn.close()

    def current_connection(self) -> sqlite3.Connection:
        """Return the connection of the active transaction.

        Raises
        ------
        RuntimeError
            If no transaction is active.
        """
        conn = self._current.get()
        if conn is None:
            raise RuntimeError("No active transaction. Wrap the call in Database.transaction().")
        return conn

    def ping(self) -> bool:
        """Return ``True`` if a trivial query succeeds against the store."""
        try:
            with self.transaction() as conn:
                conn.execute("SELECT 1").fetchone()
            return True
        except (sqlite3.Error, RecordStoreError):
            logger.warning("Database %s is not reachable", self.path)
            return False

    def init_db(self) -> None:
        """Create the database file if needed and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version, and applies any new migrations defined in
        ``MIGRATIONS``.  Append new migrations with an incremented
        version number.  All pending migrations and their ``migrations``
        rows are applied in one transaction: if any statement fails, the
        schema is left as it was.
        """
        with self.transaction() as conn:
            # sqlite3 only opens a transaction implicitly before DML, so DDL
            # would otherwise autocommit.
            if not conn.in_transaction:
                conn.execute("BEGIN")
            cursor = conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            cursor.execute("SELECT MAX(version) as version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, statements in MIGRATIONS:
                if version > current_version:
                    for statement in statements:
                        cursor.execute(statement)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    logger.info("Applied migration %s to %s", version, self.path)
                    current_version = version
