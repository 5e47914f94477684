import sqlalchemy
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class BaseModel(Base):
    """Integer surrogate key and a creation timestamp, both assigned by the database."""

    __abstract__ = True
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    created_at = Column(
        sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now(), nullable=False
    )

# Note: Models will import this Base. Do not import models here to avoid circular imports.
# Import models in alembic/env.py and app/platform/db/session.py:init_models instead.
