"""Fixed value sets for enumerated columns. Stored values are the lowercase strings."""

import enum


class MeetingStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    STARTED = "started"
    ENDED = "ended"
    CANCELLED = "cancelled"


class ChatType(str, enum.Enum):
    CHAT = "chat"
    QUESTION = "question"
    ANNOUNCEMENT = "announcement"


MEETING_STATUSES = tuple(s.value for s in MeetingStatus)
CHAT_TYPES = tuple(t.value for t in ChatType)


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """values_callable for sa.Enum: persist .value instead of member names."""
    return [member.value for member in enum_cls]
