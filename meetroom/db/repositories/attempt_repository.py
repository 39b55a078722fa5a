"""
Attempt repositories - quiz submissions and their subjective answers.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.models.attempt import Attempt
from meetroom.db.models.question import Question
from meetroom.db.models.subjective_attempt import SubjectiveAttempt
from meetroom.db.options import FindOptions, Include
from meetroom.db.repositories.base_repository import BaseRepository


class AttemptRepository(BaseRepository[Attempt]):
    def __init__(self, session):
        super().__init__(session, Attempt)

    async def list_for_user(
        self, user_id: int, policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES
    ) -> list[Attempt]:
        """A user's attempts with each subjective answer and the question it answers."""
        return await self.find_all_safe(
            policy,
            FindOptions(
                where={"user_id": user_id},
                include=Include(SubjectiveAttempt, include=Question),
                order_by=[Attempt.id],
            ),
        )


class SubjectiveAttemptRepository(BaseRepository[SubjectiveAttempt]):
    def __init__(self, session):
        super().__init__(session, SubjectiveAttempt)

    async def list_for_attempt(
        self, attempt_id: int, policy: SafeAttributes = SafeAttributes.WITH_INDEXES
    ) -> list[SubjectiveAttempt]:
        return await self.find_all_safe(
            policy,
            FindOptions(where={"attempt_id": attempt_id}, order_by=[SubjectiveAttempt.question_id]),
        )
