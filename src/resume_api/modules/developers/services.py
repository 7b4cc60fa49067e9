"""Developer profile services.

Reads of a single profile entry are public. Every other operation
fetches its target, passes it through the matching accessor and only
then reads or changes it.

Path IDs are reduced to their canonical form before they reach an
accessor or a grant, so every spelling of a UUID names the same
developer.
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

import structlog
from fastapi import Depends

from resume_api.core.constants import DEVELOPERS_RESOURCE
from resume_api.core.errors import NotFoundError
from resume_api.core.utils import canonical_id, parse_id
from resume_api.modules.developers.accessors import (
    DeveloperAccess,
    DeveloperSkillAccess,
    ExperienceAccess,
    ProjectAccess,
)
from resume_api.modules.developers.models import (
    Developer,
    DeveloperSkill,
    Experience,
    ExperienceType,
    Project,
    SocialMediaLink,
    SocialMediaNetwork,
)
from resume_api.modules.developers.repos import (
    DeveloperRepo,
    DeveloperSkillRepo,
    ExperienceRepo,
    ProjectRepo,
    SocialMediaLinkRepo,
)
from resume_api.modules.developers.schemas import (
    DeveloperUpdate,
    ExperienceUpdate,
    ProjectUpdate,
    SkillUpdate,
    SocialLinkCreate,
)
from resume_api.modules.users.services import PermissionSvc


logger = structlog.get_logger()


def _require_developer(developer: Developer | None, developer_id: str) -> Developer:
    if developer is None:
        raise NotFoundError(
            f"Developer with ID {developer_id} not found",
            resource="developer",
            resource_id=developer_id,
        )
    return developer


class DeveloperService:
    """Service for developer profile operations."""

    def __init__(
        self,
        repo: DeveloperRepo,
        accessor: DeveloperAccess,
        permissions: PermissionSvc,
    ) -> None:
        self.repo = repo
        self.accessor = accessor
        self.permissions = permissions

    async def create_default_developer(self, external_user_id: str) -> Developer:
        """Create an empty profile and grant its creator access to it.

        Raises:
            ValidationError: If the user ID is blank
        """
        developer = await self.repo.create(Developer.create_empty(external_user_id))
        await self.permissions.give_user_specific_permission(
            external_user_id, DEVELOPERS_RESOURCE, str(developer.id)
        )
        logger.info(
            "developer_created",
            developer_id=str(developer.id),
            created_by_id=external_user_id,
        )
        return developer

    async def list_developers(self, external_user_id: str) -> list[Developer]:
        """List the developers the user may access."""
        developers = await self.repo.list_all()
        return await self.accessor.filter_accessible(developers, external_user_id)

    async def list_developers_with_details(self, external_user_id: str) -> list[Developer]:
        """List the developers the user may access, with nested sections loaded."""
        developers = await self.repo.list_all_with_details()
        return await self.accessor.filter_accessible(developers, external_user_id)

    async def get_developer(self, developer_id: str) -> Developer:
        """Get a developer profile. No access check is made.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
        """
        developer = await self.repo.get_by_id(parse_id(developer_id, "developer"))
        return _require_developer(developer, developer_id)

    async def get_developer_with_details(self, developer_id: str) -> Developer:
        """Get a developer with skills, experiences and social links. No access check is made."""
        developer = await self.repo.get_by_id_with_details(parse_id(developer_id, "developer"))
        return _require_developer(developer, developer_id)

    async def get_accessible_developer(
        self,
        developer_id: str,
        external_user_id: str,
    ) -> Developer:
        """Get a developer the user may access.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
            AccessDeniedError: If the user may not access it
        """
        claim = canonical_id(developer_id, "developer")
        developer = await self.repo.get_by_id(UUID(claim))
        return await self.accessor.check_access(developer, claim, external_user_id)

    async def update_developer(
        self,
        developer_id: str,
        data: DeveloperUpdate,
        external_user_id: str,
    ) -> Developer:
        """Replace the profile fields of a developer the user may access.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
            AccessDeniedError: If the user may not access it
            ValidationError: If a text field is blank
        """
        developer = await self.get_accessible_developer(developer_id, external_user_id)
        developer.update_profile(
            name=data.name,
            email=str(data.email),
            greeting_title=data.greeting_title,
            greeting_message=data.greeting_message,
            mission_title=data.mission_title,
            mission_description=data.mission_description,
            it_experience_start_date=data.it_experience_start_date,
            work_experience_start_date=data.work_experience_start_date,
        )
        await self.repo.update(developer)
        logger.info("developer_updated", developer_id=str(developer.id))
        return developer

    async def delete_developer(self, developer_id: str, external_user_id: str) -> None:
        """Delete a developer and every ``Specific`` grant that pointed at it.

        Grants are revoked by the stored ID, whatever spelling the
        caller used.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
            AccessDeniedError: If the user may not access it
        """
        developer = await self.get_accessible_developer(developer_id, external_user_id)
        stored_id = str(developer.id)
        await self.repo.delete_by_id(developer.id)
        await self.permissions.remove_specific_permission_from_all_users(
            DEVELOPERS_RESOURCE, stored_id
        )
        logger.info("developer_deleted", developer_id=stored_id)


class SkillService:
    """Service for a developer's skills."""

    def __init__(
        self,
        repo: DeveloperSkillRepo,
        developer_repo: DeveloperRepo,
        accessor: DeveloperSkillAccess,
        developer_accessor: DeveloperAccess,
    ) -> None:
        self.repo = repo
        self.developer_repo = developer_repo
        self.accessor = accessor
        self.developer_accessor = developer_accessor

    async def add_skill(
        self,
        developer_id: str,
        technology_name: str,
        proficiency_level: float,
        external_user_id: str,
    ) -> DeveloperSkill:
        developer = await self._accessible_developer(developer_id, external_user_id)
        skill = DeveloperSkill.create(technology_name, proficiency_level, developer)
        return await self.repo.create(skill)

    async def list_skills(self, developer_id: str, external_user_id: str) -> list[DeveloperSkill]:
        developer = await self._accessible_developer(developer_id, external_user_id)
        return await self.repo.list_by_developer(developer.id)

    async def list_skills_with_projects(
        self,
        developer_id: str,
        external_user_id: str,
    ) -> list[DeveloperSkill]:
        developer = await self._accessible_developer(developer_id, external_user_id)
        return await self.repo.list_by_developer_with_projects(developer.id)

    async def get_skill(self, developer_id: str, skill_id: str) -> DeveloperSkill:
        """Get one of a developer's skills. No access check is made.

        Raises:
            BadRequestError: If either ID is not a UUID
            NotFoundError: If the skill does not exist or belongs to
                another developer
        """
        developer_uuid = parse_id(developer_id, "developer")
        skill = await self.repo.get_by_id_with_developer(parse_id(skill_id, "skill"))
        if skill is None or skill.developer_id != developer_uuid:
            raise NotFoundError("Skill not found", resource="skill", resource_id=skill_id)
        return skill

    async def update_skill(
        self,
        developer_id: str,
        skill_id: str,
        data: SkillUpdate,
        external_user_id: str,
    ) -> DeveloperSkill:
        skill = await self._accessible_skill(developer_id, skill_id, external_user_id)
        skill.update(data.technology_name, data.proficiency_level)
        await self.repo.update(skill)
        logger.info("skill_updated", skill_id=str(skill.id))
        return skill

    async def delete_skill(self, developer_id: str, skill_id: str, external_user_id: str) -> None:
        skill = await self._accessible_skill(developer_id, skill_id, external_user_id)
        await self.repo.delete_by_id(skill.id)

    async def _accessible_developer(self, developer_id: str, external_user_id: str) -> Developer:
        claim = canonical_id(developer_id, "developer")
        developer = await self.developer_repo.get_by_id(UUID(claim))
        return await self.developer_accessor.check_access(developer, claim, external_user_id)

    async def _accessible_skill(
        self,
        developer_id: str,
        skill_id: str,
        external_user_id: str,
    ) -> DeveloperSkill:
        claim = canonical_id(developer_id, "developer")
        skill = await self.repo.get_by_id_with_developer(parse_id(skill_id, "skill"))
        return await self.accessor.check_access(skill, claim, external_user_id)


class ExperienceService:
    """Service for a developer's experiences."""

    def __init__(
        self,
        repo: ExperienceRepo,
        developer_repo: DeveloperRepo,
        accessor: ExperienceAccess,
        developer_accessor: DeveloperAccess,
    ) -> None:
        self.repo = repo
        self.developer_repo = developer_repo
        self.accessor = accessor
        self.developer_accessor = developer_accessor

    async def add_experience(
        self,
        developer_id: str,
        experience_type: ExperienceType,
        title: str,
        description: str,
        location_name: str,
        start_date: datetime,
        end_date: datetime | None,
        external_user_id: str,
    ) -> Experience:
        claim = canonical_id(developer_id, "developer")
        developer = await self.developer_repo.get_by_id(UUID(claim))
        developer = await self.developer_accessor.check_access(
            developer, claim, external_user_id
        )
        experience = Experience.create(
            experience_type,
            title,
            description,
            location_name,
            start_date,
            end_date,
            developer,
        )
        return await self.repo.create(experience)

    async def list_experiences(self, developer_id: str) -> list[Experience]:
        """List a developer's experiences, most recent first. No access check is made.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
        """
        developer_uuid = parse_id(developer_id, "developer")
        _require_developer(await self.developer_repo.get_by_id(developer_uuid), developer_id)
        return await self.repo.list_by_developer(developer_uuid)

    async def get_experience(self, developer_id: str, experience_id: str) -> Experience:
        """Get one of a developer's experiences. No access check is made.

        Raises:
            BadRequestError: If either ID is not a UUID
            NotFoundError: If the experience does not exist or belongs to
                another developer
        """
        developer_uuid = parse_id(developer_id, "developer")
        experience = await self.repo.get_by_id_with_developer(
            parse_id(experience_id, "experience")
        )
        if experience is None or experience.developer_id != developer_uuid:
            raise NotFoundError(
                "Experience not found", resource="experience", resource_id=experience_id
            )
        return experience

    async def update_experience(
        self,
        developer_id: str,
        experience_id: str,
        data: ExperienceUpdate,
        external_user_id: str,
    ) -> Experience:
        experience = await self._accessible_experience(
            developer_id, experience_id, external_user_id
        )
        experience.update(
            data.experience_type,
            data.title,
            data.description,
            data.location_name,
            data.start_date,
            data.end_date,
        )
        await self.repo.update(experience)
        logger.info("experience_updated", experience_id=str(experience.id))
        return experience

    async def delete_experience(
        self,
        developer_id: str,
        experience_id: str,
        external_user_id: str,
    ) -> None:
        experience = await self._accessible_experience(
            developer_id, experience_id, external_user_id
        )
        await self.repo.delete_by_id(experience.id)

    async def _accessible_experience(
        self,
        developer_id: str,
        experience_id: str,
        external_user_id: str,
    ) -> Experience:
        claim = canonical_id(developer_id, "developer")
        experience = await self.repo.get_by_id_with_developer(
            parse_id(experience_id, "experience")
        )
        return await self.accessor.check_access(experience, claim, external_user_id)


class ProjectService:
    """Service for projects showcased under a developer's skills."""

    def __init__(
        self,
        repo: ProjectRepo,
        skill_repo: DeveloperSkillRepo,
        accessor: ProjectAccess,
        skill_accessor: DeveloperSkillAccess,
    ) -> None:
        self.repo = repo
        self.skill_repo = skill_repo
        self.accessor = accessor
        self.skill_accessor = skill_accessor

    async def add_project(
        self,
        developer_id: str,
        skill_id: str,
        title: str,
        description: str,
        external_user_id: str,
    ) -> Project:
        """Create a project under a skill the user may access."""
        claim = canonical_id(developer_id, "developer")
        skill = await self.skill_repo.get_by_id_with_developer(parse_id(skill_id, "skill"))
        skill = await self.skill_accessor.check_access(skill, claim, external_user_id)
        project = await self.repo.create(Project.create(title, description, skill))
        logger.info("project_created", project_id=str(project.id), skill_id=str(skill.id))
        return project

    async def get_project(self, project_id: str, external_user_id: str) -> Project:
        project = await self.repo.get_by_id_with_details(parse_id(project_id, "project"))
        return await self.accessor.check_access(project, external_user_id)

    async def update_project(
        self,
        project_id: str,
        data: ProjectUpdate,
        external_user_id: str,
    ) -> Project:
        project = await self.get_project(project_id, external_user_id)
        project.update(data.title, data.description)
        await self.repo.update(project)
        logger.info("project_updated", project_id=str(project.id))
        return project

    async def delete_project(self, project_id: str, external_user_id: str) -> None:
        project = await self.get_project(project_id, external_user_id)
        await self.repo.delete_by_id(project.id)


class SocialLinkService:
    """Service for the social media links on a developer's profile."""

    def __init__(
        self,
        repo: SocialMediaLinkRepo,
        developer_repo: DeveloperRepo,
        developer_accessor: DeveloperAccess,
    ) -> None:
        self.repo = repo
        self.developer_repo = developer_repo
        self.developer_accessor = developer_accessor

    async def add_link(
        self,
        developer_id: str,
        data: SocialLinkCreate,
        external_user_id: str,
    ) -> SocialMediaLink:
        claim = canonical_id(developer_id, "developer")
        developer = await self.developer_repo.get_by_id(UUID(claim))
        developer = await self.developer_accessor.check_access(
            developer, claim, external_user_id
        )
        link = await self.repo.create(SocialMediaLink.create(data.url, data.network, developer))
        logger.info(
            "social_link_added",
            developer_id=claim,
            network=data.network.value,
        )
        return link

    async def list_links(self, developer_id: str) -> list[SocialMediaLink]:
        """List a developer's links. No access check is made.

        Raises:
            BadRequestError: If the ID is not a UUID
            NotFoundError: If the developer does not exist
        """
        developer_uuid = parse_id(developer_id, "developer")
        _require_developer(await self.developer_repo.get_by_id(developer_uuid), developer_id)
        return await self.repo.list_by_developer(developer_uuid)

    async def remove_link(
        self,
        developer_id: str,
        network: SocialMediaNetwork,
        external_user_id: str,
    ) -> None:
        """Remove the oldest link to ``network``.

        Raises:
            NotFoundError: If the developer does not exist or has no link
                to that network
            AccessDeniedError: If the user may not access the developer
        """
        claim = canonical_id(developer_id, "developer")
        developer = await self.developer_repo.get_by_id(UUID(claim))
        developer = await self.developer_accessor.check_access(
            developer, claim, external_user_id
        )
        links = await self.repo.list_by_developer(developer.id)
        link = next((link for link in links if link.network == network), None)
        if link is None:
            raise NotFoundError(
                f"No {network.value} link on developer {claim}",
                resource="social_media_link",
            )
        await self.repo.delete_by_id(link.id)
        logger.info("social_link_removed", developer_id=claim, network=network.value)


# Type aliases for dependency injection
DeveloperSvc = Annotated[DeveloperService, Depends(DeveloperService)]
SkillSvc = Annotated[SkillService, Depends(SkillService)]
ExperienceSvc = Annotated[ExperienceService, Depends(ExperienceService)]
ProjectSvc = Annotated[ProjectService, Depends(ProjectService)]
SocialLinkSvc = Annotated[SocialLinkService, Depends(SocialLinkService)]
