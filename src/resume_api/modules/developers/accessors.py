"""Authorization gates for developers and their nested resources.

Every accessor follows the same sequence: the entity must exist, a
child must belong to the developer named in the request path, and the
acting user must be allowed to access the owning developer. A passing
check returns the entity unchanged.

Developer IDs handed to an accessor must already be canonical (see
``resume_api.core.utils.canonical_id``); ownership is compared as text.

Access checks resolve the acting user through
``UserService.get_or_create_user_including_permissions``, so a check
for an unseen external ID persists a new user row even when the check
itself fails.
"""

from collections.abc import Callable, Sequence
from typing import Annotated, Generic, TypeVar

import structlog
from fastapi import Depends

from resume_api.core.errors import AccessDeniedError, NotFoundError
from resume_api.core.permissions import can_access_developer
from resume_api.modules.developers.models import (
    Developer,
    DeveloperSkill,
    Experience,
    Project,
)
from resume_api.modules.users.services import UserSvc


logger = structlog.get_logger()

ChildT = TypeVar("ChildT", DeveloperSkill, Experience)


class DeveloperAccessor:
    """Decides whether a user may access a developer profile."""

    def __init__(self, users: UserSvc) -> None:
        self.users = users

    async def check_access(
        self,
        developer: Developer | None,
        developer_id: str,
        external_user_id: str,
    ) -> Developer:
        """Return ``developer`` if the user may access it.

        Args:
            developer: The fetched developer, or None when it does not exist
            developer_id: The developer ID as given in the request
            external_user_id: The acting user

        Raises:
            NotFoundError: If the developer does not exist
            AccessDeniedError: If the user holds no matching grant and did
                not create the developer
        """
        if developer is None:
            raise NotFoundError(
                f"Developer with ID {developer_id} not found",
                resource="developer",
                resource_id=developer_id,
            )

        user = await self.users.get_or_create_user_including_permissions(external_user_id)
        if not can_access_developer(user, str(developer.id), developer.created_by_id):
            logger.warning(
                "developer_access_denied",
                external_id=external_user_id,
                developer_id=developer_id,
            )
            raise AccessDeniedError(user_id=external_user_id, developer_id=developer_id)

        return developer

    async def filter_accessible(
        self,
        developers: Sequence[Developer],
        external_user_id: str,
    ) -> list[Developer]:
        """Keep the developers the user may access, in input order."""
        user = await self.users.get_or_create_user_including_permissions(external_user_id)
        if user.has_developer_access():
            return list(developers)

        return [
            developer
            for developer in developers
            if can_access_developer(user, str(developer.id), developer.created_by_id)
        ]


class OwnedResourceAccessor(Generic[ChildT]):
    """Gate for a resource owned directly by one developer.

    The owning developer is read with ``owner_of``. The developer named
    in the request path must be that owner; access to the child is then
    access to its developer.
    """

    def __init__(
        self,
        developers: DeveloperAccessor,
        owner_of: Callable[[ChildT], Developer | None],
        resource: str,
    ) -> None:
        self.developers = developers
        self.owner_of = owner_of
        self.resource = resource

    async def check_access(
        self,
        entity: ChildT | None,
        developer_id: str,
        external_user_id: str,
    ) -> ChildT:
        """Return ``entity`` if it belongs to ``developer_id`` and the user may access it.

        Raises:
            NotFoundError: If the entity or its developer does not exist
            AccessDeniedError: If the entity belongs to another developer,
                or the user may not access its developer
        """
        owner = self.owner_of(entity) if entity is not None else None
        if entity is None or owner is None:
            raise NotFoundError(f"{self.resource.capitalize()} not found", resource=self.resource)

        if str(owner.id) != developer_id:
            logger.warning(
                "developer_ownership_mismatch",
                resource=self.resource,
                resource_id=str(entity.id),
                claimed_developer_id=developer_id,
            )
            raise AccessDeniedError(user_id=external_user_id, developer_id=developer_id)

        await self.developers.check_access(owner, developer_id, external_user_id)
        return entity


class DeveloperSkillAccessor(OwnedResourceAccessor[DeveloperSkill]):
    """Gate for a skill, checked through the developer that owns it.

    The skill must be loaded with its ``developer`` relationship.
    """

    def __init__(
        self,
        developers: Annotated[DeveloperAccessor, Depends(DeveloperAccessor)],
    ) -> None:
        super().__init__(developers, lambda skill: skill.developer, "skill")


class ExperienceAccessor(OwnedResourceAccessor[Experience]):
    """Gate for an experience, checked through the developer that owns it.

    The experience must be loaded with its ``developer`` relationship.
    """

    def __init__(
        self,
        developers: Annotated[DeveloperAccessor, Depends(DeveloperAccessor)],
    ) -> None:
        super().__init__(developers, lambda experience: experience.developer, "experience")


class ProjectAccessor:
    """Decides access to a project through the first skill it is listed under."""

    def __init__(
        self,
        skills: Annotated[DeveloperSkillAccessor, Depends(DeveloperSkillAccessor)],
    ) -> None:
        self.skills = skills

    async def check_access(self, project: Project | None, external_user_id: str) -> Project:
        """Return ``project`` if the user may access the developer behind it.

        Raises:
            NotFoundError: If the project, its first skill or that skill's
                developer does not exist
            AccessDeniedError: If the user may not access that developer
        """
        skill = project.developer_skills[0] if project and project.developer_skills else None
        if skill is None or skill.developer is None:
            raise NotFoundError("Project or related developer not found", resource="project")

        await self.skills.check_access(skill, str(skill.developer.id), external_user_id)
        return project


# Type aliases for dependency injection
DeveloperAccess = Annotated[DeveloperAccessor, Depends(DeveloperAccessor)]
DeveloperSkillAccess = Annotated[DeveloperSkillAccessor, Depends(DeveloperSkillAccessor)]
ExperienceAccess = Annotated[ExperienceAccessor, Depends(ExperienceAccessor)]
ProjectAccess = Annotated[ProjectAccessor, Depends(ProjectAccessor)]
