"""
SubjectiveAttempt model - free-text answer to one question within an attempt.
Keyed by (attempt, question); both halves of the key are foreign keys.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base

if TYPE_CHECKING:
    from meetroom.db.models.attempt import Attempt
    from meetroom.db.models.question import Question


class SubjectiveAttempt(Base):
    """Subjective answer to a question within an attempt. Keyed by (attempt, question)."""

    __tablename__ = "SubjectiveAttempts"

    attempt_id: Mapped[int] = mapped_column(
        "attemptId", ForeignKey("Attempts._attemptId", ondelete="CASCADE"), primary_key=True
    )
    question_id: Mapped[int] = mapped_column(
        "QuestionId", ForeignKey("Questions._questionId", ondelete="CASCADE"), primary_key=True
    )
    obtained_marks: Mapped[int] = mapped_column("obtainedMarks", Integer, nullable=False)
    answer_text: Mapped[str] = mapped_column("answerText", String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    attempt: Mapped["Attempt"] = relationship(back_populates="subjective_attempts")
    question: Mapped["Question"] = relationship(back_populates="subjective_attempts")

    def __repr__(self) -> str:
        return f"<SubjectiveAttempt(attempt_id={self.attempt_id}, question_id={self.question_id})>"
