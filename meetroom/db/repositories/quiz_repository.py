"""
Quiz and question repositories.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.models.question import Question
from meetroom.db.models.quiz import Quiz
from meetroom.db.options import FindOptions
from meetroom.db.repositories.base_repository import BaseRepository


class QuizRepository(BaseRepository[Quiz]):
    def __init__(self, session):
        super().__init__(session, Quiz)

    async def get_with_questions(
        self, uuid: str, policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES
    ) -> Quiz | None:
        return await self.find_one_safe(policy, FindOptions(where={"uuid": uuid}, include=Question))


class QuestionRepository(BaseRepository[Question]):
    def __init__(self, session):
        super().__init__(session, Question)
