"""
Participant model - a user's seat in a meeting.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.meeting import Meeting
    from meetroom.db.models.user import User


class Participant(Base):
    """Participant entity. One row per user per meeting, with join and leave times."""

    __tablename__ = "Participants"
    __table_args__ = (UniqueConstraint("_meetingId", "_userId", name="uq_Participants_meeting_user"),)

    id: Mapped[int] = mapped_column("_participantId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "participantId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    meeting_id: Mapped[int] = mapped_column(
        "_meetingId", ForeignKey("Meetings._meetingId", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column("_userId", ForeignKey("Users._userId"), nullable=False, index=True)
    joined_at: Mapped[datetime | None] = mapped_column("joinedAt", DateTime(timezone=True), nullable=True)
    left_at: Mapped[datetime | None] = mapped_column("leftAt", DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    meeting: Mapped["Meeting"] = relationship(back_populates="participants")
    user: Mapped["User"] = relationship(back_populates="participations")

    def __repr__(self) -> str:
        return f"<Participant(id={self.id}, meeting_id={self.meeting_id}, user_id={self.user_id})>"
