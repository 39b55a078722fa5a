"""
Meeting repository - meeting lookups by public id and by owner.
Challenge: Load participants with the meeting without N+1 and without leaking internal keys.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.enums import MeetingStatus
from meetroom.db.models.meeting import Meeting
from meetroom.db.models.participant import Participant
from meetroom.db.models.user import User
from meetroom.db.options import FindOptions, Include
from meetroom.db.repositories.base_repository import BaseRepository, page_limit


class MeetingRepository(BaseRepository[Meeting]):
    def __init__(self, session):
        super().__init__(session, Meeting)

    async def get_by_uuid(
        self, uuid: str, policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES
    ) -> Meeting | None:
        """Meeting with its participants and their users, for the meeting detail view."""
        return await self.find_one_safe(
            policy,
            FindOptions(
                where={"uuid": uuid},
                include=[Include(Meeting.participants, include=Participant.user)],
            ),
        )

    async def list_for_user(
        self,
        user_id: int,
        status: MeetingStatus | None = None,
        policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Meeting]:
        """Meetings created by a user, newest schedule first."""
        where = {"created_by": user_id}
        if status is not None:
            where["status"] = status
        return await self.find_all_safe(
            policy,
            FindOptions(
                where=where,
                include=User,
                order_by=[Meeting.scheduled_at.desc()],
                offset=skip,
                limit=page_limit(limit),
            ),
        )
