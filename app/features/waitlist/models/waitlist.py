from sqlalchemy import Column, String, Text, UniqueConstraint

from app.platform.config import settings
from app.platform.db.base import BaseModel


class WaitlistEntry(BaseModel):
    __tablename__ = "waitlist_entries"
    __table_args__ = (
        UniqueConstraint("email", name="uq_waitlist_entries_email"),
        {"sqlite_autoincrement": True},
    )

    # Canonical (trimmed, lower-cased) address; the constraint above is the only uniqueness check.
    email = Column(String, nullable=False)
    name = Column(String, nullable=False)
    message = Column(Text, nullable=True)
    source = Column(
        String,
        nullable=False,
        default=settings.DEFAULT_WAITLIST_SOURCE,
        server_default=settings.DEFAULT_WAITLIST_SOURCE,
    )

    # Place in line, filled in by WaitlistService inside the insert transaction. Not a column.
    position = None

    def __repr__(self) -> str:
        return f"<WaitlistEntry(id={self.id}, email='{self.email}', source='{self.source}')>"
