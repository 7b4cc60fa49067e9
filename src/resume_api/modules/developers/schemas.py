"""Pydantic schemas for developer profile endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from resume_api.core.constants import (
    MAX_GREETING_LENGTH,
    MAX_LOCATION_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PROFICIENCY_LEVEL,
    MAX_PROFILE_HEADING_LENGTH,
    MAX_TITLE_LENGTH,
    MAX_URL_LENGTH,
    MIN_PROFICIENCY_LEVEL,
    MIN_PROFILE_TEXT_LENGTH,
)
from resume_api.modules.developers.models import ExperienceType, SocialMediaNetwork


# ============================================================
# Developer Schemas
# ============================================================


class DeveloperUpdate(BaseModel):
    """Schema for replacing a developer's profile fields."""

    name: str = Field(
        ..., min_length=MIN_PROFILE_TEXT_LENGTH, max_length=MAX_PROFILE_HEADING_LENGTH
    )
    email: EmailStr
    greeting_title: str = Field(
        ..., min_length=MIN_PROFILE_TEXT_LENGTH, max_length=MAX_PROFILE_HEADING_LENGTH
    )
    greeting_message: str = Field(
        ..., min_length=MIN_PROFILE_TEXT_LENGTH, max_length=MAX_GREETING_LENGTH
    )
    mission_title: str = Field(
        ..., min_length=MIN_PROFILE_TEXT_LENGTH, max_length=MAX_PROFILE_HEADING_LENGTH
    )
    mission_description: str = Field(
        ..., min_length=MIN_PROFILE_TEXT_LENGTH, max_length=MAX_GREETING_LENGTH
    )
    it_experience_start_date: datetime
    work_experience_start_date: datetime


class DeveloperResponse(BaseModel):
    """Schema for developer response data."""

    id: UUID
    name: str
    email: str
    image_url: str
    greeting_title: str
    greeting_message: str
    mission_title: str
    mission_description: str
    it_experience_start_date: datetime
    work_experience_start_date: datetime
    created_by_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeveloperListResponse(BaseModel):
    """Schema for listing developers."""

    items: list[DeveloperResponse]
    total: int


# ============================================================
# Skill Schemas
# ============================================================


class SkillCreate(BaseModel):
    """Schema for adding a skill to a developer."""

    technology_name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    proficiency_level: float = Field(..., ge=MIN_PROFICIENCY_LEVEL, le=MAX_PROFICIENCY_LEVEL)


class SkillUpdate(SkillCreate):
    """Schema for renaming a skill and changing its level."""


class SkillResponse(BaseModel):
    """Schema for skill response data."""

    id: UUID
    developer_id: UUID
    technology_name: str
    proficiency_level: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================================
# Experience Schemas
# ============================================================


class ExperienceCreate(BaseModel):
    """Schema for adding an experience to a developer."""

    experience_type: ExperienceType
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = Field(..., min_length=1)
    location_name: str = Field(..., min_length=1, max_length=MAX_LOCATION_LENGTH)
    start_date: datetime
    end_date: datetime | None = None


class ExperienceUpdate(ExperienceCreate):
    """Schema for replacing every field of an experience."""


class ExperienceResponse(BaseModel):
    """Schema for experience response data."""

    id: UUID
    developer_id: UUID
    experience_type: ExperienceType
    title: str
    description: str
    location_name: str
    start_date: datetime
    end_date: datetime | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ============================================================
# Project Schemas
# ============================================================


class ProjectCreate(BaseModel):
    """Schema for adding a project under a skill."""

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    description: str = Field(..., min_length=1)


class ProjectUpdate(ProjectCreate):
    """Schema for changing a project's title and description."""


class ProjectResponse(BaseModel):
    """Schema for project response data."""

    id: UUID
    title: str
    description: str
    image_url: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SkillDetailsResponse(SkillResponse):
    """A skill with the projects showcased under it."""

    projects: list[ProjectResponse]


# ============================================================
# Social Media Schemas
# ============================================================


class SocialLinkCreate(BaseModel):
    """Schema for adding a social media link to a developer."""

    url: str = Field(..., min_length=1, max_length=MAX_URL_LENGTH)
    network: SocialMediaNetwork


class SocialLinkResponse(BaseModel):
    id: UUID
    developer_id: UUID
    url: str
    network: SocialMediaNetwork
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class DeveloperDetailsResponse(DeveloperResponse):
    """A developer with every nested resume section."""

    skills: list[SkillResponse]
    experiences: list[ExperienceResponse]
    social_media_links: list[SocialLinkResponse]


class DeveloperDetailsListResponse(BaseModel):
    items: list[DeveloperDetailsResponse]
    total: int
