"""Project API routes.

Projects are created under a skill (see the developers module) but
addressed directly by ID afterwards. Access is decided through the
developer of the oldest skill the project is listed under.
"""

from fastapi import status

from resume_api.core.auth import AdminUserId, CurrentUserId
from resume_api.modules.developers.schemas import ProjectResponse, ProjectUpdate
from resume_api.modules.developers.services import ProjectSvc
from resume_api.modules.projects import router


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Get project by ID",
)
async def get_project(
    project_id: str,
    service: ProjectSvc,
    user_id: CurrentUserId,
) -> ProjectResponse:
    """Get project by ID."""
    project = await service.get_project(project_id, user_id)
    return ProjectResponse.model_validate(project)


@router.put(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update project",
)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    service: ProjectSvc,
    user_id: AdminUserId,
) -> None:
    await service.update_project(project_id, data, user_id)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
)
async def delete_project(
    project_id: str,
    service: ProjectSvc,
    user_id: AdminUserId,
) -> None:
    """Delete project by ID."""
    await service.delete_project(project_id, user_id)
