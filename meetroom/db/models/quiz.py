"""
Quiz model - a set of questions run during a meeting.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.attempt import Attempt
    from meetroom.db.models.meeting import Meeting
    from meetroom.db.models.question import Question


class Quiz(Base):
    """Quiz entity. Used for in-meeting assessments."""

    __tablename__ = "Quizzes"

    id: Mapped[int] = mapped_column("_quizId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "quizId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    meeting_id: Mapped[int] = mapped_column(
        "_meetingId", ForeignKey("Meetings._meetingId", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column("title", String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    meeting: Mapped["Meeting"] = relationship(back_populates="quizzes")
    questions: Mapped[list["Question"]] = relationship(back_populates="quiz", cascade="all, delete-orphan")
    attempts: Mapped[list["Attempt"]] = relationship(back_populates="quiz", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Quiz(id={self.id}, title={self.title})>"
