# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from meetroom.db.repositories.attempt_repository import AttemptRepository, SubjectiveAttemptRepository
from meetroom.db.repositories.base_repository import BaseRepository
from meetroom.db.repositories.chat_repository import ChatRepository
from meetroom.db.repositories.meeting_repository import MeetingRepository
from meetroom.db.repositories.participant_repository import ParticipantRepository
from meetroom.db.repositories.quiz_repository import QuestionRepository, QuizRepository
from meetroom.db.repositories.role_repository import RoleRepository
from meetroom.db.repositories.user_repository import UserRepository

__all__ = [
    "AttemptRepository",
    "BaseRepository",
    "ChatRepository",
    "MeetingRepository",
    "ParticipantRepository",
    "QuestionRepository",
    "QuizRepository",
    "RoleRepository",
    "SubjectiveAttemptRepository",
    "UserRepository",
]
