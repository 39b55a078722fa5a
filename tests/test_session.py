"""
Session lifecycle tests - commit on success, rollback and re-raise on error.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from meetroom.db import session as db_session
from meetroom.db.models import Role
from meetroom.db.repositories import RoleRepository


@pytest.fixture
def patched_session_maker(engine, monkeypatch):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    monkeypatch.setattr(db_session, "async_session_maker", maker)
    return maker


@pytest.mark.asyncio
async def test_session_scope_commits(patched_session_maker):
    async with db_session.session_scope() as session:
        await RoleRepository(session).add(Role(name="kept"))

    async with db_session.session_scope() as session:
        assert await RoleRepository(session).get_by_name("kept") is not None


@pytest.mark.asyncio
async def test_session_scope_rolls_back_and_reraises(patched_session_maker):
    with pytest.raises(RuntimeError, match="boom"):
        async with db_session.session_scope() as session:
            await RoleRepository(session).add(Role(name="dropped"))
            raise RuntimeError("boom")

    async with db_session.session_scope() as session:
        assert await RoleRepository(session).get_by_name("dropped") is None
