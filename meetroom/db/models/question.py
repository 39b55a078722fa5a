"""
Question model - one question of a quiz.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.quiz import Quiz
    from meetroom.db.models.subjective_attempt import SubjectiveAttempt


class Question(Base):
    """Question entity. A quiz item worth a number of marks."""

    __tablename__ = "Questions"

    id: Mapped[int] = mapped_column("_questionId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "questionId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    quiz_id: Mapped[int] = mapped_column(
        "_quizId", ForeignKey("Quizzes._quizId", ondelete="CASCADE"), nullable=False, index=True
    )
    text: Mapped[str] = mapped_column("questionText", Text, nullable=False)
    marks: Mapped[int] = mapped_column("marks", Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    quiz: Mapped["Quiz"] = relationship(back_populates="questions")
    subjective_attempts: Mapped[list["SubjectiveAttempt"]] = relationship(back_populates="question")

    def __repr__(self) -> str:
        return f"<Question(id={self.id}, quiz_id={self.quiz_id})>"
