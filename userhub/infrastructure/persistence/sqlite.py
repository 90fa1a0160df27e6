import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Optional

import anyio

from ...domain.errors import DuplicateUserError, UserNotFoundError
from ...domain.models import User
from ...domain.ports.persistence import UserStore


class SQLiteUserStore(UserStore):
    """SQLite-backed implementation of the durable user store."""

    def __init__(self, path: Path, *, timeout: float = 5.0) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._path = path
        self._timeout = timeout
        self._initialize()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._path, timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize(self) -> None:
        conn = self._connect()
        try:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS users (
                    email TEXT PRIMARY KEY,
                    first_name TEXT NOT NULL DEFAULT '',
                    last_name TEXT NOT NULL DEFAULT '',
                    mobile TEXT NOT NULL DEFAULT '',
                    created_at TEXT,
                    updated_at TEXT
                );
                """
            )
        finally:
            conn.close()

    # UserStore API ---------------------------------------------------------
    async def create(self, user: User) -> None:
        await anyio.to_thread.run_sync(self._insert, user)

    async def read_by_email(self, email: str) -> User:
        row = await anyio.to_thread.run_sync(self._select_by_email, email)
        if row is None:
            raise UserNotFoundError(email)
        return self._row_to_user(row)

    # Blocking helpers ------------------------------------------------------
    def _insert(self, user: User) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    """
                    INSERT INTO users (
                        email, first_name, last_name, mobile, created_at, updated_at
                    )
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        user.email,
                        user.first_name,
                        user.last_name,
                        user.mobile,
                        self._serialize(user.created_at),
                        self._serialize(user.updated_at),
                    ),
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateUserError(user.email) from exc
        finally:
            conn.close()

    def _select_by_email(self, email: str) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            cur = conn.execute("SELECT * FROM users WHERE email = ?", (email,))
            return cur.fetchone()
        finally:
            conn.close()

    @staticmethod
    def _serialize(value: Optional[datetime]) -> Optional[str]:
        return value.isoformat() if value else None

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(
            first_name=row["first_name"],
            last_name=row["last_name"],
            mobile=row["mobile"],
            email=row["email"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            updated_at=datetime.fromisoformat(row["updated_at"]) if row["updated_at"] else None,
        )
