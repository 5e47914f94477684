from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.features.waitlist.models.waitlist import WaitlistEntry
from app.features.waitlist.utils.validator import validate_submission
from app.platform.config import settings
from app.platform.db.errors import is_connection_failure
from app.platform.exceptions import DuplicateEmailError, StorageUnavailableError
from app.platform.logger import get_logger

logger = get_logger(__name__)


class WaitlistService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_to_waitlist(self, submission: Any, source: Optional[str] = None) -> WaitlistEntry:
        """
        Create exactly one waitlist entry, or nothing at all.

        The submission is validated again here. Email uniqueness is left to the
        database constraint: a conflicting insert raises DuplicateEmailError.
        Connection failures raise StorageUnavailableError and are not retried.
        """
        clean = validate_submission(submission)
        entry_source = (source or "").strip() or clean.source or settings.DEFAULT_WAITLIST_SOURCE

        entry = WaitlistEntry(
            email=clean.email,
            name=clean.name,
            message=clean.message,
            source=entry_source,
        )
        self.db.add(entry)

        try:
            await self.db.flush()
            # id, created_at and the place in line are read inside the same transaction,
            # so a failed read leaves no row behind.
            await self.db.refresh(entry)
            entry.position = await self.get_position(entry)
            await self.db.commit()
        except IntegrityError:
            await self._rollback()
            logger.info(f"Duplicate waitlist signup rejected for {clean.email}")
            raise DuplicateEmailError(clean.email)
        except Exception as exc:
            await self._rollback()
            if not is_connection_failure(exc):
                raise
            logger.error(f"Waitlist storage unavailable: {exc}")
            raise StorageUnavailableError(str(exc)) from exc

        logger.info(f"Waitlist entry {entry.id} created (source={entry.source})")
        return entry

    async def get_position(self, entry: WaitlistEntry) -> int:
        """1-based place in line, by signup order."""
        result = await self.db.execute(
            select(func.count(WaitlistEntry.id)).where(WaitlistEntry.id <= entry.id)
        )
        return result.scalar_one()

    async def get_by_email(self, email: str) -> Optional[WaitlistEntry]:
        result = await self.db.execute(
            select(WaitlistEntry).where(WaitlistEntry.email == email.strip().lower())
        )
        return result.scalars().first()

    async def get_stats(self) -> dict:
        since = datetime.now(timezone.utc) - timedelta(hours=24)
        total = await self.db.execute(select(func.count(WaitlistEntry.id)))
        recent = await self.db.execute(
            select(func.count(WaitlistEntry.id)).where(WaitlistEntry.created_at >= since)
        )
        return {
            "total_signups": total.scalar_one(),
            "signups_last_24h": recent.scalar_one(),
        }

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except Exception as exc:
            logger.warning(f"Rollback after failed waitlist insert also failed: {exc}")
