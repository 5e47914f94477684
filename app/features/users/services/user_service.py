from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.features.users.models.user import User
from app.features.users.utils.security import hash_password
from app.platform.db.errors import is_connection_failure
from app.platform.exceptions import DuplicateUsernameError, StorageUnavailableError, ValidationError
from app.platform.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Storage access for user records. There is no login flow on top of it."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_user(self, username: str, password: str) -> User:
        username = (username or "").strip()
        if not username:
            raise ValidationError(field="username", reason="required")
        if not password:
            raise ValidationError(field="password", reason="required")

        user = User(username=username, password=hash_password(password))
        self.db.add(user)
        try:
            await self.db.flush()
            await self.db.refresh(user)
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateUsernameError(username)
        except Exception as exc:
            await self.db.rollback()
            if not is_connection_failure(exc):
                raise
            logger.error(f"User storage unavailable: {exc}")
            raise StorageUnavailableError(str(exc)) from exc

        logger.info(f"User {user.id} created")
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()
