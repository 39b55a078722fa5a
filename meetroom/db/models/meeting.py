"""
Meeting model - a scheduled session owned by a user, with participants, chat and quizzes.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid
from meetroom.db.enums import MeetingStatus, enum_values

if TYPE_CHECKING:
    from meetroom.db.models.chat import Chat
    from meetroom.db.models.participant import Participant
    from meetroom.db.models.quiz import Quiz
    from meetroom.db.models.user import User


class Meeting(Base):
    """Meeting entity. Owns its participants, chat and quizzes."""

    __tablename__ = "Meetings"

    id: Mapped[int] = mapped_column("_meetingId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "meetingId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    created_by: Mapped[int | None] = mapped_column(
        "createdBy", ForeignKey("Users._userId"), nullable=True, index=True
    )
    status: Mapped[MeetingStatus] = mapped_column(
        "status",
        Enum(MeetingStatus, name="enum_Meetings_status", values_callable=enum_values),
        nullable=False,
    )
    scheduled_at: Mapped[datetime] = mapped_column("scheduledAt", DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    user: Mapped[Optional["User"]] = relationship(back_populates="meetings")
    participants: Mapped[list["Participant"]] = relationship(
        back_populates="meeting", cascade="all, delete-orphan"
    )
    chats: Mapped[list["Chat"]] = relationship(back_populates="meeting", cascade="all, delete-orphan")
    quizzes: Mapped[list["Quiz"]] = relationship(back_populates="meeting", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Meeting(id={self.id}, status={self.status})>"
