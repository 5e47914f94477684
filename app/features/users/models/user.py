from sqlalchemy import Column, String, UniqueConstraint

from app.platform.db.base import BaseModel


class User(BaseModel):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        {"sqlite_autoincrement": True},
    )

    username = Column(String, nullable=False)
    # bcrypt hash, never the plain password
    password = Column(String, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username})>"
