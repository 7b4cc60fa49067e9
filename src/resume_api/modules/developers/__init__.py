"""Developers module: profiles, skills, experiences and their access rules."""

from fastapi import APIRouter


router = APIRouter(prefix="/developers", tags=["developers"])

# Import routes to register them (must be after router is defined)
from resume_api.modules.developers import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "developers",
    "version": "1.0.0",
    "description": "Developer profiles and nested resume resources",
    "dependencies": ["users"],
}
