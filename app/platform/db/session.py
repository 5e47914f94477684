from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from app.platform.config import settings
from app.platform.db.base import Base


def build_engine(database_url: str) -> AsyncEngine:
    options = {"echo": False, "future": True, "pool_pre_ping": True}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_recycle=1800,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
    return create_async_engine(database_url, **options)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind, expire_on_commit=False, autoflush=False, autocommit=False)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = build_sessionmaker(engine)


async def get_db():
    async with SessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine = engine) -> None:
    """Create missing tables. Production schemas are managed by Alembic."""
    # Register tables on the metadata.
    from app.features.users.models.user import User  # noqa: F401
    from app.features.waitlist.models.waitlist import WaitlistEntry  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
