"""
Pytest fixtures - test DB, session, seeded meeting graph.
Challenge: Isolated tests; every test gets a fresh in-memory database.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from meetroom.db.base import Base
from meetroom.db.enums import ChatType, MeetingStatus
from meetroom.db.models import (
    Attempt,
    Chat,
    Meeting,
    Participant,
    Question,
    Quiz,
    Role,
    SubjectiveAttempt,
    User,
)

# In-memory SQLite for speed; StaticPool keeps the single connection (and its data) alive
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> dict:
    """Role, two users, a meeting with both as participants, chat, a quiz and one attempt.

    The session is emptied afterwards so queries load fresh, projected rows.
    """
    host_role = Role(name="host")
    host = User(name="Host", email="host@example.com", password="hashed-1", role=host_role)
    guest = User(name="Guest", email="guest@example.com", password="hashed-2")
    meeting = Meeting(
        user=host,
        status=MeetingStatus.SCHEDULED,
        scheduled_at=datetime(2021, 5, 21, 10, 0, tzinfo=timezone.utc),
    )
    meeting.participants = [Participant(user=host), Participant(user=guest)]
    meeting.chats = [
        Chat(sender=host, message="Welcome"),
        Chat(sender=guest, message="When is the quiz?", type=ChatType.QUESTION),
    ]
    quiz = Quiz(meeting=meeting, title="Warm-up")
    question = Question(quiz=quiz, text="Describe a join.", marks=5)
    attempt = Attempt(quiz=quiz, user=guest, total_marks=4)
    attempt.subjective_attempts = [
        SubjectiveAttempt(question=question, obtained_marks=4, answer_text="Rows matched on keys.")
    ]
    session.add_all([host_role, host, guest, meeting, quiz, question, attempt])
    await session.commit()

    ids = {
        "role_id": host_role.id,
        "host_id": host.id,
        "guest_id": guest.id,
        "meeting_id": meeting.id,
        "meeting_uuid": meeting.uuid,
        "quiz_uuid": quiz.uuid,
        "question_id": question.id,
        "attempt_id": attempt.id,
    }
    session.expunge_all()
    return ids
