"""Developer profile API routes.

Single profile entries, experience lists and social links are public.
Listings across developers and skill listings need a token; the
caller sees only what it may access. Every create, update and delete
needs the admin claim as well as access to the developer.

Path identifiers are taken as plain strings and parsed by the services,
so a malformed ID is reported as ``invalid_id_format``.
"""

from fastapi import Query, status

from resume_api.core.auth import AdminUserId, CurrentUserId
from resume_api.modules.developers import router
from resume_api.modules.developers.models import SocialMediaNetwork
from resume_api.modules.developers.schemas import (
    DeveloperDetailsListResponse,
    DeveloperDetailsResponse,
    DeveloperListResponse,
    DeveloperResponse,
    DeveloperUpdate,
    ExperienceCreate,
    ExperienceResponse,
    ExperienceUpdate,
    ProjectCreate,
    ProjectResponse,
    SkillCreate,
    SkillDetailsResponse,
    SkillResponse,
    SkillUpdate,
    SocialLinkCreate,
    SocialLinkResponse,
)
from resume_api.modules.developers.services import (
    DeveloperSvc,
    ExperienceSvc,
    ProjectSvc,
    SkillSvc,
    SocialLinkSvc,
)


# ============================================================
# Developer Routes
# ============================================================


@router.post(
    "",
    response_model=DeveloperResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create developer",
    description="Create an empty developer profile owned by the current admin.",
)
async def create_developer(
    service: DeveloperSvc,
    user_id: AdminUserId,
) -> DeveloperResponse:
    """Create a default developer for the current user."""
    developer = await service.create_default_developer(user_id)
    return DeveloperResponse.model_validate(developer)


@router.get(
    "",
    response_model=DeveloperListResponse,
    summary="List developers",
    description="List the developers the current user may access.",
)
async def list_developers(
    service: DeveloperSvc,
    user_id: CurrentUserId,
) -> DeveloperListResponse:
    """List accessible developers."""
    developers = await service.list_developers(user_id)
    return DeveloperListResponse(
        items=[DeveloperResponse.model_validate(d) for d in developers],
        total=len(developers),
    )


@router.get(
    "/with-details",
    response_model=DeveloperDetailsListResponse,
    summary="List developers with details",
    description="List accessible developers with skills, experiences and social links.",
)
async def list_developers_with_details(
    service: DeveloperSvc,
    user_id: CurrentUserId,
) -> DeveloperDetailsListResponse:
    developers = await service.list_developers_with_details(user_id)
    return DeveloperDetailsListResponse(
        items=[DeveloperDetailsResponse.model_validate(d) for d in developers],
        total=len(developers),
    )


@router.get(
    "/{developer_id}",
    response_model=DeveloperResponse,
    summary="Get developer by ID",
)
async def get_developer(
    developer_id: str,
    service: DeveloperSvc,
) -> DeveloperResponse:
    """Get developer by ID."""
    developer = await service.get_developer(developer_id)
    return DeveloperResponse.model_validate(developer)


@router.get(
    "/{developer_id}/with-details",
    response_model=DeveloperDetailsResponse,
    summary="Get developer with details",
)
async def get_developer_with_details(
    developer_id: str,
    service: DeveloperSvc,
) -> DeveloperDetailsResponse:
    developer = await service.get_developer_with_details(developer_id)
    return DeveloperDetailsResponse.model_validate(developer)


@router.put(
    "/{developer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update developer",
    description="Replace the developer's profile fields.",
)
async def update_developer(
    developer_id: str,
    data: DeveloperUpdate,
    service: DeveloperSvc,
    user_id: AdminUserId,
) -> None:
    await service.update_developer(developer_id, data, user_id)


@router.delete(
    "/{developer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete developer",
    description="Delete a developer and revoke every grant that pointed at it.",
)
async def delete_developer(
    developer_id: str,
    service: DeveloperSvc,
    user_id: AdminUserId,
) -> None:
    """Delete developer by ID."""
    await service.delete_developer(developer_id, user_id)


# ============================================================
# Skill Routes
# ============================================================


@router.post(
    "/{developer_id}/skills",
    response_model=SkillResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add skill",
)
async def add_skill(
    developer_id: str,
    data: SkillCreate,
    service: SkillSvc,
    user_id: AdminUserId,
) -> SkillResponse:
    """Add a skill to a developer."""
    skill = await service.add_skill(
        developer_id, data.technology_name, data.proficiency_level, user_id
    )
    return SkillResponse.model_validate(skill)


@router.get(
    "/{developer_id}/skills",
    response_model=list[SkillResponse],
    summary="List skills",
)
async def list_skills(
    developer_id: str,
    service: SkillSvc,
    user_id: CurrentUserId,
) -> list[SkillResponse]:
    skills = await service.list_skills(developer_id, user_id)
    return [SkillResponse.model_validate(s) for s in skills]


@router.get(
    "/{developer_id}/skills/with-projects",
    response_model=list[SkillDetailsResponse],
    summary="List skills with projects",
)
async def list_skills_with_projects(
    developer_id: str,
    service: SkillSvc,
    user_id: CurrentUserId,
) -> list[SkillDetailsResponse]:
    skills = await service.list_skills_with_projects(developer_id, user_id)
    return [SkillDetailsResponse.model_validate(s) for s in skills]


@router.get(
    "/{developer_id}/skills/{skill_id}",
    response_model=SkillResponse,
    summary="Get skill",
)
async def get_skill(
    developer_id: str,
    skill_id: str,
    service: SkillSvc,
) -> SkillResponse:
    skill = await service.get_skill(developer_id, skill_id)
    return SkillResponse.model_validate(skill)


@router.put(
    "/{developer_id}/skills/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update skill",
)
async def update_skill(
    developer_id: str,
    skill_id: str,
    data: SkillUpdate,
    service: SkillSvc,
    user_id: AdminUserId,
) -> None:
    await service.update_skill(developer_id, skill_id, data, user_id)


@router.delete(
    "/{developer_id}/skills/{skill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete skill",
)
async def delete_skill(
    developer_id: str,
    skill_id: str,
    service: SkillSvc,
    user_id: AdminUserId,
) -> None:
    await service.delete_skill(developer_id, skill_id, user_id)


@router.post(
    "/{developer_id}/skills/{skill_id}/projects",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add project",
    description="Showcase a new project under one of the developer's skills.",
)
async def add_project(
    developer_id: str,
    skill_id: str,
    data: ProjectCreate,
    service: ProjectSvc,
    user_id: AdminUserId,
) -> ProjectResponse:
    """Add a project under a skill."""
    project = await service.add_project(
        developer_id, skill_id, data.title, data.description, user_id
    )
    return ProjectResponse.model_validate(project)


# ============================================================
# Experience Routes
# ============================================================


@router.post(
    "/{developer_id}/experiences",
    response_model=ExperienceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add experience",
)
async def add_experience(
    developer_id: str,
    data: ExperienceCreate,
    service: ExperienceSvc,
    user_id: AdminUserId,
) -> ExperienceResponse:
    """Add an experience to a developer."""
    experience = await service.add_experience(
        developer_id,
        data.experience_type,
        data.title,
        data.description,
        data.location_name,
        data.start_date,
        data.end_date,
        user_id,
    )
    return ExperienceResponse.model_validate(experience)


@router.get(
    "/{developer_id}/experiences",
    response_model=list[ExperienceResponse],
    summary="List experiences",
)
async def list_experiences(
    developer_id: str,
    service: ExperienceSvc,
) -> list[ExperienceResponse]:
    experiences = await service.list_experiences(developer_id)
    return [ExperienceResponse.model_validate(e) for e in experiences]


@router.get(
    "/{developer_id}/experiences/{experience_id}",
    response_model=ExperienceResponse,
    summary="Get experience",
)
async def get_experience(
    developer_id: str,
    experience_id: str,
    service: ExperienceSvc,
) -> ExperienceResponse:
    experience = await service.get_experience(developer_id, experience_id)
    return ExperienceResponse.model_validate(experience)


@router.put(
    "/{developer_id}/experiences/{experience_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update experience",
)
async def update_experience(
    developer_id: str,
    experience_id: str,
    data: ExperienceUpdate,
    service: ExperienceSvc,
    user_id: AdminUserId,
) -> None:
    await service.update_experience(developer_id, experience_id, data, user_id)


@router.delete(
    "/{developer_id}/experiences/{experience_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete experience",
)
async def delete_experience(
    developer_id: str,
    experience_id: str,
    service: ExperienceSvc,
    user_id: AdminUserId,
) -> None:
    await service.delete_experience(developer_id, experience_id, user_id)


# ============================================================
# Social Media Routes
# ============================================================


@router.post(
    "/{developer_id}/social-media",
    response_model=SocialLinkResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add social media link",
)
async def add_social_link(
    developer_id: str,
    data: SocialLinkCreate,
    service: SocialLinkSvc,
    user_id: AdminUserId,
) -> SocialLinkResponse:
    link = await service.add_link(developer_id, data, user_id)
    return SocialLinkResponse.model_validate(link)


@router.get(
    "/{developer_id}/social-media",
    response_model=list[SocialLinkResponse],
    summary="List social media links",
)
async def list_social_links(
    developer_id: str,
    service: SocialLinkSvc,
) -> list[SocialLinkResponse]:
    links = await service.list_links(developer_id)
    return [SocialLinkResponse.model_validate(link) for link in links]


@router.delete(
    "/{developer_id}/social-media",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove social media link",
    description="Remove the oldest link to the given network.",
)
async def remove_social_link(
    developer_id: str,
    service: SocialLinkSvc,
    user_id: AdminUserId,
    network: SocialMediaNetwork = Query(...),
) -> None:
    await service.remove_link(developer_id, network, user_id)
