"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep queries in one place for optimization and reuse.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.models.role import Role
from meetroom.db.models.user import User
from meetroom.db.options import FindOptions
from meetroom.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with domain logic."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(
        self, email: str, policy: SafeAttributes = SafeAttributes.WITH_INDEXES
    ) -> User | None:
        """Find user by email - used for authentication."""
        return await self.find_one_safe(policy, FindOptions(where={"email": email}))

    async def get_by_uuid_with_role(
        self, uuid: str, policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES
    ) -> User | None:
        return await self.find_one_safe(policy, FindOptions(where={"uuid": uuid}, include=Role))
