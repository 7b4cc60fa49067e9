"""Repositories for developers and the resources nested under them."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from resume_api.api.dependencies import DBSession
from resume_api.modules.developers.models import (
    Developer,
    DeveloperSkill,
    Experience,
    Project,
    SocialMediaLink,
)


def _with_details():
    return (
        selectinload(Developer.skills),
        selectinload(Developer.experiences),
        selectinload(Developer.social_media_links),
    )


class DeveloperRepository:
    """Repository for Developer database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, developer: Developer) -> Developer:
        """Insert a developer and populate its ID."""
        self.session.add(developer)
        await self.session.flush()
        return developer

    async def get_by_id(self, developer_id: UUID) -> Developer | None:
        return await self.session.get(Developer, developer_id)

    async def get_by_id_with_details(self, developer_id: UUID) -> Developer | None:
        """Get a developer with skills, experiences and social links loaded."""
        stmt = select(Developer).where(Developer.id == developer_id).options(*_with_details())
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Developer]:
        """List every developer, oldest first."""
        stmt = select(Developer).order_by(Developer.created_at, Developer.id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_all_with_details(self) -> list[Developer]:
        stmt = (
            select(Developer)
            .options(*_with_details())
            .order_by(Developer.created_at, Developer.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, developer: Developer) -> Developer:
        """Flush pending profile changes and reload the server-set ``updated_at``."""
        await self.session.flush()
        await self.session.refresh(developer, attribute_names=["updated_at"])
        return developer

    async def delete_by_id(self, developer_id: UUID) -> None:
        """Delete a developer. Nested rows cascade in the database."""
        await self.session.execute(delete(Developer).where(Developer.id == developer_id))
        await self.session.flush()


class DeveloperSkillRepository:
    """Repository for DeveloperSkill database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, skill: DeveloperSkill) -> DeveloperSkill:
        self.session.add(skill)
        await self.session.flush()
        return skill

    async def list_by_developer(self, developer_id: UUID) -> list[DeveloperSkill]:
        stmt = (
            select(DeveloperSkill)
            .where(DeveloperSkill.developer_id == developer_id)
            .order_by(DeveloperSkill.created_at, DeveloperSkill.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_by_developer_with_projects(self, developer_id: UUID) -> list[DeveloperSkill]:
        """List a developer's skills with the projects under each loaded."""
        stmt = (
            select(DeveloperSkill)
            .where(DeveloperSkill.developer_id == developer_id)
            .options(selectinload(DeveloperSkill.projects))
            .order_by(DeveloperSkill.created_at, DeveloperSkill.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id_with_developer(self, skill_id: UUID) -> DeveloperSkill | None:
        """Get a skill with its owning developer loaded."""
        stmt = (
            select(DeveloperSkill)
            .where(DeveloperSkill.id == skill_id)
            .options(selectinload(DeveloperSkill.developer))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, skill: DeveloperSkill) -> DeveloperSkill:
        await self.session.flush()
        return skill

    async def delete_by_id(self, skill_id: UUID) -> None:
        await self.session.execute(delete(DeveloperSkill).where(DeveloperSkill.id == skill_id))
        await self.session.flush()


class ExperienceRepository:
    """Repository for Experience database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, experience: Experience) -> Experience:
        self.session.add(experience)
        await self.session.flush()
        return experience

    async def list_by_developer(self, developer_id: UUID) -> list[Experience]:
        """List a developer's experiences, most recent first."""
        stmt = (
            select(Experience)
            .where(Experience.developer_id == developer_id)
            .order_by(Experience.start_date.desc(), Experience.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id_with_developer(self, experience_id: UUID) -> Experience | None:
        """Get an experience with its owning developer loaded."""
        stmt = (
            select(Experience)
            .where(Experience.id == experience_id)
            .options(selectinload(Experience.developer))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, experience: Experience) -> Experience:
        await self.session.flush()
        return experience

    async def delete_by_id(self, experience_id: UUID) -> None:
        await self.session.execute(delete(Experience).where(Experience.id == experience_id))
        await self.session.flush()


class ProjectRepository:
    """Repository for Project database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        return project

    async def get_by_id_with_details(self, project_id: UUID) -> Project | None:
        """Get a project with its skills and their developers loaded."""
        stmt = (
            select(Project)
            .where(Project.id == project_id)
            .options(
                selectinload(Project.developer_skills).selectinload(DeveloperSkill.developer)
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, project: Project) -> Project:
        await self.session.flush()
        return project

    async def delete_by_id(self, project_id: UUID) -> None:
        await self.session.execute(delete(Project).where(Project.id == project_id))
        await self.session.flush()


class SocialMediaLinkRepository:
    """Repository for SocialMediaLink database operations."""

    def __init__(self, session: DBSession) -> None:
        self.session = session

    async def create(self, link: SocialMediaLink) -> SocialMediaLink:
        self.session.add(link)
        await self.session.flush()
        return link

    async def list_by_developer(self, developer_id: UUID) -> list[SocialMediaLink]:
        """List a developer's links, oldest first."""
        stmt = (
            select(SocialMediaLink)
            .where(SocialMediaLink.developer_id == developer_id)
            .order_by(SocialMediaLink.created_at, SocialMediaLink.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_id(self, link_id: UUID) -> None:
        await self.session.execute(delete(SocialMediaLink).where(SocialMediaLink.id == link_id))
        await self.session.flush()


# Type aliases for dependency injection
DeveloperRepo = Annotated[DeveloperRepository, Depends(DeveloperRepository)]
DeveloperSkillRepo = Annotated[DeveloperSkillRepository, Depends(DeveloperSkillRepository)]
ExperienceRepo = Annotated[ExperienceRepository, Depends(ExperienceRepository)]
ProjectRepo = Annotated[ProjectRepository, Depends(ProjectRepository)]
SocialMediaLinkRepo = Annotated[SocialMediaLinkRepository, Depends(SocialMediaLinkRepository)]
