"""Initial schema: roles, users, meetings, participants, chats, quizzes, attempts

Revision ID: 001
Revises:
Create Date: 2021-05-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from meetroom.db.enums import MEETING_STATUSES

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("createdAt", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updatedAt", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "Roles",
        sa.Column("_roleId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("roleId", sa.String(36), nullable=False),
        sa.Column("roleName", sa.String(70), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("_roleId"),
    )
    op.create_index("ix_Roles_roleId", "Roles", ["roleId"], unique=True)

    op.create_table(
        "Users",
        sa.Column("_userId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("userId", sa.String(36), nullable=False),
        sa.Column("_roleId", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(70), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_roleId"], ["Roles._roleId"]),
        sa.PrimaryKeyConstraint("_userId"),
    )
    op.create_index("ix_Users_userId", "Users", ["userId"], unique=True)
    op.create_index("ix_Users_email", "Users", ["email"], unique=True)
    op.create_index("ix_Users__roleId", "Users", ["_roleId"], unique=False)

    op.create_table(
        "Meetings",
        sa.Column("_meetingId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meetingId", sa.String(36), nullable=False),
        sa.Column("createdBy", sa.Integer(), nullable=True),
        sa.Column("status", sa.Enum(*MEETING_STATUSES, name="enum_Meetings_status"), nullable=False),
        sa.Column("scheduledAt", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["createdBy"], ["Users._userId"]),
        sa.PrimaryKeyConstraint("_meetingId"),
    )
    op.create_index("ix_Meetings_meetingId", "Meetings", ["meetingId"], unique=True)
    op.create_index("ix_Meetings_createdBy", "Meetings", ["createdBy"], unique=False)

    op.create_table(
        "Participants",
        sa.Column("_participantId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("participantId", sa.String(36), nullable=False),
        sa.Column("_meetingId", sa.Integer(), nullable=False),
        sa.Column("_userId", sa.Integer(), nullable=False),
        sa.Column("joinedAt", sa.DateTime(timezone=True), nullable=True),
        sa.Column("leftAt", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_meetingId"], ["Meetings._meetingId"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["_userId"], ["Users._userId"]),
        sa.PrimaryKeyConstraint("_participantId"),
        sa.UniqueConstraint("_meetingId", "_userId", name="uq_Participants_meeting_user"),
    )
    op.create_index("ix_Participants_participantId", "Participants", ["participantId"], unique=True)
    op.create_index("ix_Participants__meetingId", "Participants", ["_meetingId"], unique=False)
    op.create_index("ix_Participants__userId", "Participants", ["_userId"], unique=False)

    # Chats.type arrives in 002
    op.create_table(
        "Chats",
        sa.Column("_chatId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("chatId", sa.String(36), nullable=False),
        sa.Column("_meetingId", sa.Integer(), nullable=False),
        sa.Column("_senderId", sa.Integer(), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_meetingId"], ["Meetings._meetingId"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["_senderId"], ["Users._userId"]),
        sa.PrimaryKeyConstraint("_chatId"),
    )
    op.create_index("ix_Chats_chatId", "Chats", ["chatId"], unique=True)
    op.create_index("ix_Chats__meetingId", "Chats", ["_meetingId"], unique=False)
    op.create_index("ix_Chats__senderId", "Chats", ["_senderId"], unique=False)

    op.create_table(
        "Quizzes",
        sa.Column("_quizId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("quizId", sa.String(36), nullable=False),
        sa.Column("_meetingId", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_meetingId"], ["Meetings._meetingId"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("_quizId"),
    )
    op.create_index("ix_Quizzes_quizId", "Quizzes", ["quizId"], unique=True)
    op.create_index("ix_Quizzes__meetingId", "Quizzes", ["_meetingId"], unique=False)

    op.create_table(
        "Questions",
        sa.Column("_questionId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("questionId", sa.String(36), nullable=False),
        sa.Column("_quizId", sa.Integer(), nullable=False),
        sa.Column("questionText", sa.Text(), nullable=False),
        sa.Column("marks", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_quizId"], ["Quizzes._quizId"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("_questionId"),
    )
    op.create_index("ix_Questions_questionId", "Questions", ["questionId"], unique=True)
    op.create_index("ix_Questions__quizId", "Questions", ["_quizId"], unique=False)

    op.create_table(
        "Attempts",
        sa.Column("_attemptId", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("attemptId", sa.String(36), nullable=False),
        sa.Column("_quizId", sa.Integer(), nullable=False),
        sa.Column("_userId", sa.Integer(), nullable=False),
        sa.Column("totalMarks", sa.Integer(), nullable=True),
        sa.Column("submittedAt", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["_quizId"], ["Quizzes._quizId"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["_userId"], ["Users._userId"]),
        sa.PrimaryKeyConstraint("_attemptId"),
    )
    op.create_index("ix_Attempts_attemptId", "Attempts", ["attemptId"], unique=True)
    op.create_index("ix_Attempts__quizId", "Attempts", ["_quizId"], unique=False)
    op.create_index("ix_Attempts__userId", "Attempts", ["_userId"], unique=False)

    op.create_table(
        "SubjectiveAttempts",
        sa.Column("attemptId", sa.Integer(), nullable=False),
        sa.Column("QuestionId", sa.Integer(), nullable=False),
        sa.Column("obtainedMarks", sa.Integer(), nullable=False),
        sa.Column("answerText", sa.String(255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["attemptId"], ["Attempts._attemptId"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["QuestionId"], ["Questions._questionId"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("attemptId", "QuestionId"),
    )


def downgrade() -> None:
    op.drop_table("SubjectiveAttempts")
    for table, indexes in (
        ("Attempts", ["ix_Attempts__userId", "ix_Attempts__quizId", "ix_Attempts_attemptId"]),
        ("Questions", ["ix_Questions__quizId", "ix_Questions_questionId"]),
        ("Quizzes", ["ix_Quizzes__meetingId", "ix_Quizzes_quizId"]),
        ("Chats", ["ix_Chats__senderId", "ix_Chats__meetingId", "ix_Chats_chatId"]),
        (
            "Participants",
            ["ix_Participants__userId", "ix_Participants__meetingId", "ix_Participants_participantId"],
        ),
        ("Meetings", ["ix_Meetings_createdBy", "ix_Meetings_meetingId"]),
        ("Users", ["ix_Users__roleId", "ix_Users_email", "ix_Users_userId"]),
        ("Roles", ["ix_Roles_roleId"]),
    ):
        for index in indexes:
            op.drop_index(index, table)
        op.drop_table(table)
    # PostgreSQL keeps enum types after their table is gone
    sa.Enum(name="enum_Meetings_status").drop(op.get_bind(), checkfirst=True)
