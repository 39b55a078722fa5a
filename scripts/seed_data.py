#!/usr/bin/env python3
"""
Seed script: creates roles, users and meetings (with participants and chat) through the repositories.
Run after migrations:
  alembic upgrade head
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --meetings-per-user 3
"""

import argparse
import asyncio
import logging
import random
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from meetroom.core.logging_config import configure_logging
from meetroom.db.attributes import SafeAttributes
from meetroom.db.enums import ChatType, MeetingStatus
from meetroom.db.options import FindOrCreateOptions
from meetroom.db.repositories import (
    ChatRepository,
    MeetingRepository,
    ParticipantRepository,
    RoleRepository,
    UserRepository,
)
from meetroom.db.session import engine, session_scope

logger = logging.getLogger("seed_data")

ROLES = ["admin", "host", "attendee"]

MESSAGES = [
    "Hi everyone",
    "Can you see my screen?",
    "Slides are in the shared folder.",
    "Let's start in two minutes.",
    "Thanks, see you next week!",
]


async def seed(users: int, meetings_per_user: int) -> None:
    async with session_scope() as session:
        roles = {name: await RoleRepository(session).ensure(name) for name in ROLES}
        user_repo = UserRepository(session)

        created_users = []
        for i in range(users):
            # Passwords are hashed by the application layer; seed rows only need a placeholder
            user, created = await user_repo.find_or_create_safe(
                SafeAttributes.WITH_INDEXES,
                FindOrCreateOptions(
                    where={"email": f"user{i + 1}@example.com"},
                    defaults={
                        "name": f"User {i + 1}",
                        "password": "!seed",
                        "role_id": roles["host" if i % 5 == 0 else "attendee"].id,
                    },
                ),
            )
            created_users.append(user)
            if created:
                logger.debug("created %s", user.email)
        logger.info("%d users ready", len(created_users))

        meeting_repo = MeetingRepository(session)
        participant_repo = ParticipantRepository(session)
        chat_repo = ChatRepository(session)
        now = datetime.now(timezone.utc)
        meetings = 0
        for host in created_users[:: max(1, len(created_users) // 5)]:
            for _ in range(meetings_per_user):
                meeting = await meeting_repo.create_safe(
                    {
                        "created_by": host.id,
                        "status": random.choice(list(MeetingStatus)),
                        "scheduled_at": now + timedelta(days=random.randint(-10, 10)),
                    },
                    SafeAttributes.WITH_INDEXES,
                )
                guests = random.sample(created_users, k=min(len(created_users), 4))
                for member in {host.id: host, **{g.id: g for g in guests}}.values():
                    await participant_repo.create_safe(
                        {"meeting_id": meeting.id, "user_id": member.id, "joined_at": meeting.scheduled_at}
                    )
                    await chat_repo.create_safe(
                        {"meeting_id": meeting.id, "sender_id": member.id, "message": random.choice(MESSAGES)}
                    )
                await chat_repo.create_safe(
                    {"meeting_id": meeting.id, "message": "Meeting recorded.", "type": ChatType.ANNOUNCEMENT}
                )
                meetings += 1
        logger.info("%d meetings created", meetings)
    await engine.dispose()


def main():
    ap = argparse.ArgumentParser(description="Seed roles, users and meetings")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--meetings-per-user", type=int, default=2, help="Meetings per hosting user")
    ap.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = ap.parse_args()

    configure_logging(args.log_level)
    asyncio.run(seed(args.users, args.meetings_per_user))


if __name__ == "__main__":
    main()
