"""
Chat repository - meeting chat history.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.enums import ChatType
from meetroom.db.models.chat import Chat
from meetroom.db.options import FindOptions, Include
from meetroom.db.repositories.base_repository import BaseRepository, page_limit


class ChatRepository(BaseRepository[Chat]):
    def __init__(self, session):
        super().__init__(session, Chat)

    async def list_for_meeting(
        self,
        meeting_id: int,
        type: ChatType | None = None,
        policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Chat]:
        """Messages in posting order, optionally only one chat type."""
        where = {"meeting_id": meeting_id}
        if type is not None:
            where["type"] = type
        return await self.find_all_safe(
            policy,
            FindOptions(
                where=where,
                include=Include(Chat.sender),
                order_by=[Chat.created_at, Chat.id],
                offset=skip,
                limit=page_limit(limit),
            ),
        )
