# Import every model so relationships resolve and Alembic sees the full metadata

from meetroom.db.models.role import Role
from meetroom.db.models.user import User
from meetroom.db.models.meeting import Meeting
from meetroom.db.models.participant import Participant
from meetroom.db.models.chat import Chat
from meetroom.db.models.quiz import Quiz
from meetroom.db.models.question import Question
from meetroom.db.models.attempt import Attempt
from meetroom.db.models.subjective_attempt import SubjectiveAttempt

__all__ = [
    "Attempt",
    "Chat",
    "Meeting",
    "Participant",
    "Question",
    "Quiz",
    "Role",
    "SubjectiveAttempt",
    "User",
]
