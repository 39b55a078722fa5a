"""
Role model - named permission group a user belongs to.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from meetroom.db.base import Base, new_uuid

if TYPE_CHECKING:
    from meetroom.db.models.user import User


class Role(Base):
    """Role entity. A named role assigned to users."""

    __tablename__ = "Roles"

    id: Mapped[int] = mapped_column("_roleId", Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(
        "roleId", String(36), unique=True, index=True, nullable=False, default=new_uuid
    )
    name: Mapped[str] = mapped_column("roleName", String(70), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=True, server_default=func.now(), onupdate=func.now()
    )

    users: Mapped[list["User"]] = relationship(back_populates="role")

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
