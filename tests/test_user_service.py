import hashlib

import bcrypt
import pytest

from app.features.users.services.user_service import UserService
from app.features.users.utils.security import hash_password
from app.platform.exceptions import DuplicateUsernameError, StorageUnavailableError, ValidationError
from app.platform.db.session import build_sessionmaker


def password_matches(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(hashlib.sha256(plain.encode("utf-8")).digest(), hashed.encode("utf-8"))


class TestPasswordHashing:
    def test_hash_is_not_the_password(self):
        hashed = hash_password("TestPassword123")
        assert hashed != "TestPassword123"
        assert password_matches("TestPassword123", hashed)
        assert not password_matches("wrong", hashed)

    def test_long_passwords_are_not_truncated(self):
        base = "x" * 80
        hashed = hash_password(base + "a")
        assert not password_matches(base + "b", hashed)


class TestUserService:
    @pytest.mark.asyncio
    async def test_create_user_stores_hashed_password(self, db_session):
        user = await UserService(db_session).create_user("lunar", "TestPassword123")

        assert user.id == 1
        assert user.username == "lunar"
        assert user.password != "TestPassword123"
        assert password_matches("TestPassword123", user.password)
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_username(self, db_session, session_factory):
        service = UserService(db_session)
        await service.create_user("lunar", "first")

        with pytest.raises(DuplicateUsernameError) as exc:
            await service.create_user("lunar", "second")

        assert exc.value.username == "lunar"
        async with session_factory() as session:
            stored = await UserService(session).get_by_username("lunar")
        assert password_matches("first", stored.password)

    @pytest.mark.asyncio
    async def test_blank_username_is_rejected(self, db_session):
        with pytest.raises(ValidationError) as exc:
            await UserService(db_session).create_user("  ", "secret")
        assert exc.value.field == "username"

    @pytest.mark.asyncio
    async def test_missing_password_is_rejected(self, db_session):
        with pytest.raises(ValidationError) as exc:
            await UserService(db_session).create_user("lunar", "")
        assert exc.value.field == "password"

    @pytest.mark.asyncio
    async def test_get_by_username_missing(self, db_session):
        assert await UserService(db_session).get_by_username("nobody") is None

    @pytest.mark.asyncio
    async def test_unreachable_store(self, broken_engine):
        async with build_sessionmaker(broken_engine)() as session:
            with pytest.raises(StorageUnavailableError):
                await UserService(session).create_user("lunar", "secret")
