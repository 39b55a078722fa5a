"""
Repository tests - safe queries against a real (SQLite) database.
Challenge: Projection holds on root rows and includes; failures propagate unchanged.
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import InvalidRequestError

from meetroom.config import Settings
from meetroom.db.attributes import SafeAttributes
from meetroom.db.enums import ChatType, MeetingStatus
from meetroom.db.models import Chat, Meeting, Participant, Role, SubjectiveAttempt
from meetroom.db.options import FindOptions, FindOrCreateOptions, Include
from meetroom.db.repositories import base_repository
from meetroom.db.repositories import (
    AttemptRepository,
    BaseRepository,
    ChatRepository,
    MeetingRepository,
    ParticipantRepository,
    QuizRepository,
    RoleRepository,
    UserRepository,
)

KEYS = {"id", "created_by", "meeting_id", "user_id", "sender_id", "role_id", "quiz_id"}


@pytest.mark.asyncio
async def test_find_all_without_options_selects_everything(session, seeded):
    meetings = await MeetingRepository(session).find_all_safe(SafeAttributes.WITHOUT_INDEXES)
    assert len(meetings) == 1
    assert meetings[0].created_by == seeded["host_id"]
    assert not inspect(meetings[0]).unloaded & {"created_by", "status", "scheduled_at"}


@pytest.mark.asyncio
async def test_find_all_without_indexes_projects_root_and_include(session, seeded):
    repo = MeetingRepository(session)
    meetings = await repo.find_all_safe(SafeAttributes.WITHOUT_INDEXES, FindOptions(include=Participant))

    meeting = meetings[0]
    assert "created_by" in inspect(meeting).unloaded
    assert meeting.status == MeetingStatus.SCHEDULED

    data = meeting.to_dict(SafeAttributes.WITHOUT_INDEXES)
    assert data["uuid"] == seeded["meeting_uuid"]
    assert not KEYS & data.keys()
    assert len(data["participants"]) == 2
    for participant in data["participants"]:
        assert not KEYS & participant.keys()
        assert "uuid" in participant


@pytest.mark.asyncio
async def test_find_one_with_indexes(session, seeded):
    user = await UserRepository(session).find_one_safe(
        SafeAttributes.WITH_INDEXES, FindOptions(where={"email": "host@example.com"})
    )
    assert user.id == seeded["host_id"]
    assert user.role_id == seeded["role_id"]
    assert await UserRepository(session).get_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_find_by_pk(session, seeded):
    repo = MeetingRepository(session)
    meeting = await repo.find_by_pk_safe(SafeAttributes.WITHOUT_INDEXES, seeded["meeting_id"], FindOptions())
    assert meeting.uuid == seeded["meeting_uuid"]
    assert await repo.find_by_pk_safe(SafeAttributes.WITHOUT_INDEXES, None, FindOptions()) is None
    assert await repo.find_by_pk_safe(SafeAttributes.WITH_INDEXES, 9999) is None


@pytest.mark.asyncio
async def test_find_by_composite_pk(session, seeded):
    repo = BaseRepository(session, SubjectiveAttempt)
    answer = await repo.find_by_pk_safe(
        SafeAttributes.WITH_INDEXES, (seeded["attempt_id"], seeded["question_id"]), FindOptions()
    )
    assert answer.obtained_marks == 4
    assert answer.answer_text == "Rows matched on keys."


@pytest.mark.asyncio
async def test_create_safe_reloads_projection(session):
    role = await RoleRepository(session).create_safe({"name": "moderator"}, SafeAttributes.WITHOUT_INDEXES, FindOptions())
    assert role.id is not None
    assert role.created_at is not None
    data = role.to_dict(SafeAttributes.WITHOUT_INDEXES)
    assert data["name"] == "moderator"
    assert len(data["uuid"]) == 36
    assert "id" not in data


@pytest.mark.asyncio
async def test_find_or_create(session):
    repo = RoleRepository(session)
    options = FindOrCreateOptions(where={"name": "guest"})
    first, created = await repo.find_or_create_safe(SafeAttributes.WITH_INDEXES, options)
    second, created_again = await repo.find_or_create_safe(SafeAttributes.WITH_INDEXES, options)

    assert created is True
    assert created_again is False
    assert first.uuid == second.uuid
    assert (await repo.ensure("guest")).id == first.id


@pytest.mark.asyncio
async def test_find_or_create_requires_where(session):
    with pytest.raises(InvalidRequestError):
        await RoleRepository(session).find_or_create_safe(SafeAttributes.WITH_INDEXES, FindOrCreateOptions())


@pytest.mark.asyncio
async def test_meeting_detail_loads_nested_users(session, seeded):
    meeting = await MeetingRepository(session).get_by_uuid(seeded["meeting_uuid"])
    data = meeting.to_dict(SafeAttributes.WITHOUT_INDEXES)
    emails = sorted(p["user"]["email"] for p in data["participants"])
    assert emails == ["guest@example.com", "host@example.com"]
    assert all("id" not in p["user"] for p in data["participants"])


@pytest.mark.asyncio
async def test_include_where_filters_related_rows(session, seeded):
    meetings = await MeetingRepository(session).find_all_safe(
        SafeAttributes.WITHOUT_INDEXES,
        FindOptions(include=Include(Meeting.chats, where={"type": ChatType.QUESTION})),
    )
    assert [c.message for c in meetings[0].chats] == ["When is the quiz?"]


@pytest.mark.asyncio
async def test_chat_history_by_type(session, seeded):
    repo = ChatRepository(session)
    everything = await repo.list_for_meeting(seeded["meeting_id"])
    questions = await repo.list_for_meeting(seeded["meeting_id"], type=ChatType.QUESTION)

    assert len(everything) == 2
    assert everything[0].type == ChatType.CHAT
    assert [c.message for c in questions] == ["When is the quiz?"]
    assert questions[0].sender.email == "guest@example.com"


@pytest.mark.asyncio
async def test_meetings_for_user(session, seeded):
    repo = MeetingRepository(session)
    assert len(await repo.list_for_user(seeded["host_id"])) == 1
    assert await repo.list_for_user(seeded["host_id"], status=MeetingStatus.ENDED) == []
    assert await repo.list_for_user(seeded["guest_id"]) == []


@pytest.mark.asyncio
async def test_participants_and_attempts(session, seeded):
    participants = await ParticipantRepository(session).list_for_meeting(seeded["meeting_id"], active_only=True)
    assert len(participants) == 2

    attempts = await AttemptRepository(session).list_for_user(seeded["guest_id"])
    answer = attempts[0].subjective_attempts[0]
    assert answer.obtained_marks == 4
    assert answer.question.text == "Describe a join."

    quiz = await QuizRepository(session).get_with_questions(seeded["quiz_uuid"])
    assert [q.marks for q in quiz.questions] == [5]


@pytest.mark.asyncio
async def test_user_with_role(session, seeded):
    repo = UserRepository(session)
    host = await repo.get_by_email("host@example.com")
    guest = await repo.get_by_email("guest@example.com")

    host_data = (await repo.get_by_uuid_with_role(host.uuid)).to_dict(SafeAttributes.WITHOUT_INDEXES)
    guest_data = (await repo.get_by_uuid_with_role(guest.uuid)).to_dict(SafeAttributes.WITHOUT_INDEXES)
    assert host_data["role"]["name"] == "host"
    assert guest_data["role"] is None


@pytest.mark.asyncio
async def test_plain_crud(session, seeded):
    repo = RoleRepository(session)
    role = await repo.add(Role(name="observer"))
    assert [r.name for r in await repo.get_many(skip=0, limit=10)] == ["host", "observer"]

    await repo.delete(role)
    await session.flush()
    assert await repo.get_by_id(role.id) is None


@pytest.mark.asyncio
async def test_chat_default_type(session, seeded):
    chat = await BaseRepository(session, Chat).create_safe(
        {"meeting_id": seeded["meeting_id"], "message": "system notice"}, SafeAttributes.WITH_INDEXES
    )
    assert chat.type == ChatType.CHAT
    assert chat.sender_id is None


@pytest.mark.asyncio
async def test_unknown_where_column_raises_orm_error(session, seeded):
    with pytest.raises(InvalidRequestError, match="nope"):
        await UserRepository(session).find_all_safe(SafeAttributes.WITH_INDEXES, FindOptions(where={"nope": 1}))

    with pytest.raises(InvalidRequestError, match="nope"):
        await MeetingRepository(session).find_all_safe(
            SafeAttributes.WITHOUT_INDEXES,
            FindOptions(include=Include(Meeting.chats, where={"nope": 1})),
        )


@pytest.mark.asyncio
async def test_find_or_create_with_include_loads_relationship(session):
    role, created = await RoleRepository(session).find_or_create_safe(
        SafeAttributes.WITHOUT_INDEXES,
        FindOrCreateOptions(where={"name": "moderator"}, include=Role.users),
    )

    assert created is True
    data = role.to_dict(SafeAttributes.WITHOUT_INDEXES)
    assert data["name"] == "moderator"
    assert data["users"] == []
    assert "id" not in data


@pytest.mark.asyncio
async def test_page_size_comes_from_settings(session, seeded, monkeypatch):
    monkeypatch.setattr(base_repository, "get_settings", lambda: Settings(default_page_size=1, max_page_size=1))

    assert len(await UserRepository(session).get_many()) == 1
    assert len(await UserRepository(session).get_many(limit=50)) == 1
    assert len(await ChatRepository(session).list_for_meeting(seeded["meeting_id"])) == 1
