"""
Participant repository - who is (or was) in a meeting.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.models.participant import Participant
from meetroom.db.models.user import User
from meetroom.db.options import FindOptions
from meetroom.db.repositories.base_repository import BaseRepository


class ParticipantRepository(BaseRepository[Participant]):
    def __init__(self, session):
        super().__init__(session, Participant)

    async def list_for_meeting(
        self,
        meeting_id: int,
        active_only: bool = False,
        policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES,
    ) -> list[Participant]:
        where = {"meeting_id": meeting_id}
        if active_only:
            where["left_at"] = None
        return await self.find_all_safe(
            policy, FindOptions(where=where, include=User, order_by=[Participant.id])
        )
