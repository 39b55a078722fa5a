"""
User model - account identity; creator of meetings and author of chat and attempts.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.attempt import Attempt
    from meetroom.db.models.meeting import Meeting
    from meetroom.db.models.participant import Participant
    from meetroom.db.models.role import Role


class User(Base):
    """User entity. Integer id for joins, uuid for everything exposed outside."""

    __tablename__ = "Users"

    id: Mapped[int] = mapped_column("_userId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "userId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    role_id: Mapped[int | None] = mapped_column(
        "_roleId", ForeignKey("Roles._roleId"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column("name", String(70), nullable=False)
    email: Mapped[str] = mapped_column("email", String(100), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column("password", String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    role: Mapped[Optional["Role"]] = relationship(back_populates="users")
    meetings: Mapped[list["Meeting"]] = relationship(back_populates="user")
    participations: Mapped[list["Participant"]] = relationship(back_populates="user")
    attempts: Mapped[list["Attempt"]] = relationship(back_populates="user")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
