"""
Authoritative artist store backed by the relational ``artists`` table.

Lookups are keyed by contact email. Every call is bounded by a timeout so a
slow database degrades callers to baseline data instead of stalling them.
Transport failures and timeouts are raised as ``StoreUnavailableError``;
"no row" is a normal ``None`` result.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.exceptions import StoreUnavailableError
from app.models.artist import Artist

logger = logging.getLogger(__name__)

# Columns clients may write through a profile update
WRITABLE_COLUMNS = (
    "full_name", "bio", "avatar_url", "location", "website", "phone",
    "instagram", "twitter", "facebook", "youtube", "spotify", "apple_music",
)

ROW_COLUMNS = WRITABLE_COLUMNS + (
    "email", "total_plays", "total_followers", "total_concerts",
    "coins_balance", "is_verified", "created_at",
)


def _row_to_dict(artist: Artist) -> dict[str, Any]:
    row = {column: getattr(artist, column) for column in ROW_COLUMNS}
    if isinstance(row["created_at"], datetime):
        row["created_at"] = row["created_at"].isoformat()
    return row


class ArtistStore:
    """Reads and writes artist rows through an async session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], timeout: float = 2.0):
        self._session_factory = session_factory
        self._timeout = timeout

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        """
        Fetch the artist row for ``email``.

        Returns:
            Column values keyed by column name, or None if no row exists

        Raises:
            StoreUnavailableError: on database errors or timeout
        """
        async def _query() -> dict[str, Any] | None:
            async with self._session_factory() as session:
                result = await session.execute(select(Artist).where(Artist.email == email))
                artist = result.scalar_one_or_none()
                return _row_to_dict(artist) if artist else None

        return await self._bounded(_query(), f"find_by_email({email})")

    async def update_by_email(self, email: str, fields: dict[str, Any]) -> bool:
        """
        Write the writable subset of ``fields`` to the row for ``email``.

        Returns:
            True if a row was updated, False if no row matched

        Raises:
            StoreUnavailableError: on database errors or timeout
        """
        values = {column: fields[column] for column in WRITABLE_COLUMNS if column in fields}
        values["updated_at"] = datetime.now(timezone.utc)

        async def _update() -> bool:
            async with self._session_factory() as session:
                result = await session.execute(
                    update(Artist).where(Artist.email == email).values(**values)
                )
                await session.commit()
                return result.rowcount > 0

        return await self._bounded(_update(), f"update_by_email({email})")

    async def _bounded(self, operation, label: str):
        try:
            return await asyncio.wait_for(operation, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise StoreUnavailableError(f"{label} timed out after {self._timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(f"{label} failed: {type(e).__name__}: {e}") from e
