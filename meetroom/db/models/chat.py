"""
Chat model - a message posted in a meeting.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid
from meetroom.db.enums import ChatType, enum_values

if TYPE_CHECKING:
    from meetroom.db.models.meeting import Meeting
    from meetroom.db.models.user import User


class Chat(Base):
    """Chat entity. Messages posted in a meeting; a null sender marks a system message."""

    __tablename__ = "Chats"

    id: Mapped[int] = mapped_column("_chatId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "chatId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    meeting_id: Mapped[int] = mapped_column(
        "_meetingId", ForeignKey("Meetings._meetingId", ondelete="CASCADE"), nullable=False, index=True
    )
    # Null for system-generated announcements
    sender_id: Mapped[int | None] = mapped_column(
        "_senderId", ForeignKey("Users._userId"), nullable=True, index=True
    )
    message: Mapped[str] = mapped_column("message", Text, nullable=False)
    type: Mapped[ChatType | None] = mapped_column(
        "type",
        Enum(ChatType, name="enum_Chats_type", values_callable=enum_values),
        nullable=True,
        default=ChatType.CHAT,
        server_default=ChatType.CHAT.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    meeting: Mapped["Meeting"] = relationship(back_populates="chats")
    sender: Mapped[Optional["User"]] = relationship()

    def __repr__(self) -> str:
        return f"<Chat(id={self.id}, type={self.type})>"
