"""Add Chats.type

Revision ID: 002
Revises: 001
Create Date: 2021-05-21

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from meetroom.db.enums import CHAT_TYPES

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

chat_type = sa.Enum(*CHAT_TYPES, name="enum_Chats_type")


def upgrade() -> None:
    # add_column does not emit CREATE TYPE; no-op on dialects without named enums
    chat_type.create(op.get_bind(), checkfirst=True)
    op.add_column("Chats", sa.Column("type", chat_type, nullable=True, server_default="chat"))


def downgrade() -> None:
    op.drop_column("Chats", "type")
    chat_type.drop(op.get_bind(), checkfirst=True)
