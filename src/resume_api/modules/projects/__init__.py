"""Projects module: direct access to projects by ID."""

from fastapi import APIRouter


router = APIRouter(prefix="/projects", tags=["projects"])

# Import routes to register them (must be after router is defined)
from resume_api.modules.projects import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "projects",
    "version": "1.0.0",
    "description": "Projects, authorized through the skill they are listed under",
    "dependencies": ["developers"],
}
