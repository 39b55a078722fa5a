"""
Role repository - role lookups used when assigning users.
"""

from meetroom.db.attributes import SafeAttributes
from meetroom.db.models.role import Role
from meetroom.db.options import FindOptions, FindOrCreateOptions
from meetroom.db.repositories.base_repository import BaseRepository


class RoleRepository(BaseRepository[Role]):
    def __init__(self, session):
        super().__init__(session, Role)

    async def get_by_name(self, name: str, policy: SafeAttributes = SafeAttributes.WITH_INDEXES) -> Role | None:
        return await self.find_one_safe(policy, FindOptions(where={"name": name}))

    async def ensure(self, name: str) -> Role:
        """Return the role with this name, creating it on first use."""
        role, _ = await self.find_or_create_safe(
            SafeAttributes.WITH_INDEXES, FindOrCreateOptions(where={"name": name})
        )
        return role
