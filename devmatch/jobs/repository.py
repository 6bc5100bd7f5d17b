"""Database repository for stored job postings.

This module provides async SQLite database operations for the local
posting store: list, get, create, update and soft delete.
"""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

import aiosqlite

from devmatch.jobs.models import JobPostingInput, NormalizedJobPosting

# SQL schema for the postings table
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS job_postings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    company TEXT NOT NULL,
    location TEXT,
    description TEXT,
    required_skills TEXT NOT NULL DEFAULT '[]',
    preferred_skills TEXT NOT NULL DEFAULT '[]',
    experience_level TEXT,
    salary_min REAL,
    salary_max REAL,
    salary_currency TEXT,
    remote_options TEXT NOT NULL DEFAULT 'On-site',
    posted_at TEXT NOT NULL,
    expires_at TEXT,
    is_active INTEGER NOT NULL DEFAULT 1,
    application_url TEXT
)
"""

CREATE_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_job_postings_active ON job_postings(is_active);
CREATE INDEX IF NOT EXISTS idx_job_postings_posted ON job_postings(posted_at);
"""


class JobPostingRepository:
    """Async SQLite repository for job postings."""

    def __init__(self, db_path: Path | str):
        """Initialize the repository.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._connection: aiosqlite.Connection | None = None

    @asynccontextmanager
    async def _get_connection(self) -> AsyncGenerator[aiosqlite.Connection, None]:
        if self._connection is None:
            self._connection = await aiosqlite.connect(self.db_path)
            self._connection.row_factory = aiosqlite.Row
        yield self._connection

    async def initialize(self) -> None:
        """Initialize the database, creating tables if needed."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        async with self._get_connection() as conn:
            await conn.execute(CREATE_TABLE_SQL)
            await conn.executescript(CREATE_INDEX_SQL)
            await conn.commit()

    async def close(self) -> None:
        """Close the database connection."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def list_active(self, now: datetime | None = None) -> list[NormalizedJobPosting]:
        """List active, unexpired postings, newest first.

        Args:
            now: Reference time for the expiry check (defaults to the current time).
        """
        current = now or datetime.now(UTC)
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM job_postings
                WHERE is_active = 1
                ORDER BY posted_at DESC, id ASC
                """
            )
            rows = await cursor.fetchall()

        postings = [self._row_to_posting(row) for row in rows]
        return [posting for posting in postings if posting.is_open(current)]

    async def get(self, posting_id: int) -> NormalizedJobPosting | None:
        """Get a posting by id, active or not.

        Returns:
            The posting if found, None otherwise.
        """
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM job_postings WHERE id = ?",
                (posting_id,),
            )
            row = await cursor.fetchone()

        if row is None:
            return None

        return self._row_to_posting(row)

    async def create(self, data: JobPostingInput) -> NormalizedJobPosting:
        """Insert a posting, stamped as posted now and active."""
        posted_at = datetime.now(UTC)

        async with self._get_connection() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO job_postings (
                    title, company, location, description, required_skills,
                    preferred_skills, experience_level, salary_min, salary_max,
                    salary_currency, remote_options, posted_at, expires_at,
                    is_active, application_url
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, 1, ?)
                """,
                (
                    *self._content_values(data),
                    posted_at.isoformat(),
                    data.expires_at.isoformat() if data.expires_at else None,
                    data.application_url,
                ),
            )
            await conn.commit()
            posting_id = cursor.lastrowid

        created = await self.get(int(posting_id))
        if created is None:
            raise RuntimeError(f"Posting {posting_id} vanished after insert")
        return created

    async def update(
        self, posting_id: int, data: JobPostingInput
    ) -> NormalizedJobPosting | None:
        """Replace a posting's content fields.

        `posted_at` and the active flag are left untouched.

        Returns:
            The updated posting, or None if no posting has that id.
        """
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                """
                UPDATE job_postings
                SET title = ?, company = ?, location = ?, description = ?,
                    required_skills = ?, preferred_skills = ?, experience_level = ?,
                    salary_min = ?, salary_max = ?, salary_currency = ?,
                    remote_options = ?, expires_at = ?, application_url = ?
                WHERE id = ?
                """,
                (
                    *self._content_values(data),
                    data.expires_at.isoformat() if data.expires_at else None,
                    data.application_url,
                    posting_id,
                ),
            )
            await conn.commit()
            updated = cursor.rowcount

        if not updated:
            return None
        return await self.get(posting_id)

    async def deactivate(self, posting_id: int) -> bool:
        """Soft delete a posting.

        Returns:
            True if a posting was deactivated, False if the id is unknown.
        """
        async with self._get_connection() as conn:
            cursor = await conn.execute(
                "UPDATE job_postings SET is_active = 0 WHERE id = ?",
                (posting_id,),
            )
            await conn.commit()
            return cursor.rowcount > 0

    @staticmethod
    def _content_values(data: JobPostingInput) -> tuple:
        return (
            data.title,
            data.company,
            data.location,
            data.description,
            json.dumps(data.required_skills),
            json.dumps(data.preferred_skills),
            data.experience_level,
            data.salary_min,
            data.salary_max,
            data.salary_currency,
            data.remote_options,
        )

    def _row_to_posting(self, row: aiosqlite.Row) -> NormalizedJobPosting:
        """Convert a database row to a NormalizedJobPosting."""

        def parse_datetime(value: str | None) -> datetime | None:
            if value is None:
                return None
            return datetime.fromisoformat(value)

        def parse_skills(value: str | None) -> list[str]:
            if not value:
                return []
            try:
                skills = json.loads(value)
            except json.JSONDecodeError:
                return [s.strip() for s in value.split(",") if s.strip()]
            return [str(s) for s in skills] if isinstance(skills, list) else []

        return NormalizedJobPosting(
            id=row["id"],
            title=row["title"],
            company=row["company"],
            location=row["location"],
            description=row["description"],
            required_skills=parse_skills(row["required_skills"]),
            preferred_skills=parse_skills(row["preferred_skills"]),
            experience_level=row["experience_level"],
            salary_min=row["salary_min"],
            salary_max=row["salary_max"],
            salary_currency=row["salary_currency"],
            remote_options=row["remote_options"],
            posted_at=parse_datetime(row["posted_at"]) or datetime.now(UTC),
            expires_at=parse_datetime(row["expires_at"]),
            is_active=bool(row["is_active"]),
            application_url=row["application_url"],
        )
