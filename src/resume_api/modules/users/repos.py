"""User and permission repositories for database operations."""

from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends
from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.attributes import set_committed_value

from resume_api.api.dependencies import DBSession
from resume_api.core.permissions.models import Permission, PermissionScope
from resume_api.modules.users.models import User


logger = structlog.get_logger()


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def get_by_external_id(
        self,
        external_id: str,
        include_permissions: bool = False,
    ) -> User | None:
        """Get a user by the identity provider's subject ID.

        Args:
            external_id: The external user ID
            include_permissions: Eagerly load the user's permissions. When
                False the collection is left empty; new grants can still be
                appended to it.

        Returns:
            User if found, None otherwise
        """
        stmt = select(User).where(User.external_id == external_id)
        if include_permissions:
            stmt = stmt.options(selectinload(User.permissions))
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()

        # Mark the unloaded collection as empty so appends are tracked
        if user is not None and "permissions" in inspect(user).unloaded:
            set_committed_value(user, "permissions", [])
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get a user by primary key, with permissions loaded."""
        stmt = (
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.permissions))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def register(self, user: User, include_permissions: bool = False) -> User:
        """Insert a new user, tolerating a concurrent insert of the same ID.

        The insert runs inside a SAVEPOINT. If another transaction created
        a user with the same external ID first, the unique constraint
        fails, the savepoint is rolled back and the existing row is
        returned instead.

        Args:
            user: Transient user to insert
            include_permissions: Load permissions when falling back to the
                existing row

        Returns:
            The persisted user for ``user.external_id``
        """
        try:
            async with self.session.begin_nested():
                self.session.add(user)
                await self.session.flush()
        except IntegrityError:
            existing = await self.get_by_external_id(
                user.external_id, include_permissions=include_permissions
            )
            if existing is None:
                raise
            logger.info("user_register_conflict", external_id=user.external_id)
            return existing

        return user

    async def update(self, user: User) -> User:
        """Flush pending changes to a user and its permissions."""
        self.session.add(user)
        await self.session.flush()
        return user


class PermissionRepository:
    """Repository for Permission bulk operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def delete_all_specific(self, resource: str, resource_id: str) -> int:
        """Delete every ``Specific`` grant on one resource instance.

        Grants are removed regardless of which user owns them. ``All``
        grants are left untouched.

        Args:
            resource: The resource type
            resource_id: The resource instance ID

        Returns:
            Number of permissions deleted
        """
        stmt = (
            delete(Permission)
            .where(
                Permission.resource == resource,
                Permission.resource_id == resource_id,
                Permission.scope == PermissionScope.SPECIFIC,
            )
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0


# Type aliases for dependency injection
UserRepo = Annotated[UserRepository, Depends(UserRepository)]
PermissionRepo = Annotated[PermissionRepository, Depends(PermissionRepository)]
