"""User and permission services."""

from typing import Annotated

import structlog
from fastapi import Depends

from resume_api.core.permissions.models import Permission
from resume_api.modules.users.models import User
from resume_api.modules.users.repos import PermissionRepo, UserRepo


logger = structlog.get_logger()


class UserService:
    """Get-or-create access to users keyed by external ID.

    Users are never registered explicitly: the first authorization
    check or grant for an unseen external ID creates the row.
    """

    def __init__(self, repo: UserRepo) -> None:
        self.repo = repo

    async def get_or_create_user(self, external_id: str) -> User:
        """Get a user by external ID, creating it if unseen.

        The returned user's permissions are not loaded; grants may be
        added to it but ``has_permission`` must not be relied on.

        Raises:
            ValidationError: If the external ID is blank
        """
        return await self._get_or_create(external_id, include_permissions=False)

    async def get_or_create_user_including_permissions(self, external_id: str) -> User:
        """Get a user by external ID with permissions loaded, creating it if unseen.

        A newly created user has no permissions.

        Raises:
            ValidationError: If the external ID is blank
        """
        return await self._get_or_create(external_id, include_permissions=True)

    async def _get_or_create(self, external_id: str, include_permissions: bool) -> User:
        user = await self.repo.get_by_external_id(
            external_id, include_permissions=include_permissions
        )
        if user is not None:
            return user

        user = await self.repo.register(
            User.create(external_id), include_permissions=include_permissions
        )
        logger.info("user_created", external_id=external_id)
        return user


class PermissionService:
    """Grants and revokes permissions on behalf of administrators and managers."""

    def __init__(
        self,
        users: Annotated[UserService, Depends(UserService)],
        user_repo: UserRepo,
        permission_repo: PermissionRepo,
    ) -> None:
        self.users = users
        self.user_repo = user_repo
        self.permission_repo = permission_repo

    async def give_user_all_permission(self, external_user_id: str, resource_name: str) -> None:
        """Grant a user access to every instance of a resource type.

        Raises:
            ValidationError: If the user ID or resource name is blank
        """
        permission = Permission.create_all(resource_name)
        await self._grant(external_user_id, permission)

    async def give_user_specific_permission(
        self,
        external_user_id: str,
        resource_name: str,
        resource_identifier: str,
    ) -> None:
        """Grant a user access to a single resource instance.

        Raises:
            ValidationError: If any argument is blank
        """
        permission = Permission.create_specific(resource_name, resource_identifier)
        await self._grant(external_user_id, permission)

    async def remove_specific_permission_from_all_users(
        self,
        resource_name: str,
        resource_identifier: str,
    ) -> int:
        """Revoke every ``Specific`` grant on a resource instance, for all users.

        Called after the instance itself is deleted. ``All`` grants on the
        resource type are kept.

        Returns:
            Number of grants removed
        """
        removed = await self.permission_repo.delete_all_specific(
            resource_name, resource_identifier
        )
        logger.info(
            "specific_permissions_revoked",
            resource=resource_name,
            resource_id=resource_identifier,
            removed=removed,
        )
        return removed

    async def _grant(self, external_user_id: str, permission: Permission) -> None:
        # Existing grants are not needed to append a new one
        user = await self.users.get_or_create_user(external_user_id)
        user.add_permission(permission)
        await self.user_repo.update(user)
        logger.info(
            "permission_granted",
            external_id=external_user_id,
            resource=permission.resource,
            resource_id=permission.resource_id,
            scope=permission.scope.value,
        )


# Type aliases for dependency injection
UserSvc = Annotated[UserService, Depends(UserService)]
PermissionSvc = Annotated[PermissionService, Depends(PermissionService)]
