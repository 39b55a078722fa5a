"""
Attempt model - a user's submission for a quiz.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.quiz import Quiz
    from meetroom.db.models.subjective_attempt import SubjectiveAttempt
    from meetroom.db.models.user import User


class Attempt(Base):
    """Attempt entity. One user's submission to a quiz."""

    __tablename__ = "Attempts"

    id: Mapped[int] = mapped_column("_attemptId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "attemptId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    quiz_id: Mapped[int] = mapped_column(
        "_quizId", ForeignKey("Quizzes._quizId", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column("_userId", ForeignKey("Users._userId"), nullable=False, index=True)
    total_marks: Mapped[int | None] = mapped_column("totalMarks", Integer, nullable=True)
    submitted_at: Mapped[datetime | None] = mapped_column("submittedAt", DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    quiz: Mapped["Quiz"] = relationship(back_populates="attempts")
    user: Mapped["User"] = relationship(back_populates="attempts")
    subjective_attempts: Mapped[list["SubjectiveAttempt"]] = relationship(
        back_populates="attempt", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Attempt(id={self.id}, quiz_id={self.quiz_id}, user_id={self.user_id})>"
