"""Test factories and builders.

Request schemas are generated with polyfactory. Domain objects are
built through their own factory methods so they start out in the same
state the services would produce, with IDs and timestamps filled in as
if they had been flushed.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

from jose import jwt
from polyfactory.factories.pydantic_factory import ModelFactory

from resume_api.config import settings
from resume_api.core.permissions import Permission
from resume_api.modules.developers.models import (
    Developer,
    DeveloperSkill,
    Experience,
    ExperienceType,
    Project,
    SocialMediaLink,
    SocialMediaNetwork,
)
from resume_api.modules.developers.schemas import (
    DeveloperUpdate,
    ExperienceCreate,
    ExperienceUpdate,
    ProjectCreate,
    ProjectUpdate,
    SkillCreate,
    SkillUpdate,
    SocialLinkCreate,
)
from resume_api.modules.permissions.schemas import AllPermissionGrant, SpecificPermissionGrant
from resume_api.modules.users.models import User


def create_test_token(
    external_user_id: str,
    permissions: list[str] | None = None,
    expires_in: timedelta = timedelta(minutes=15),
) -> str:
    """Sign a token the way the identity provider would."""
    claims = {
        "sub": external_user_id,
        "exp": datetime.now(UTC) + expires_in,
        settings.permissions_claim: permissions or [],
    }
    if settings.jwt_audience:
        claims["aud"] = settings.jwt_audience
    if settings.jwt_issuer:
        claims["iss"] = settings.jwt_issuer
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def _stamp(entity):
    now = datetime.now(UTC)
    entity.id = entity.id or uuid4()
    entity.created_at = now
    entity.updated_at = now
    return entity


def build_user(external_id: str = "auth0|user", *permissions: Permission) -> User:
    """Build a user holding ``permissions``."""
    user = User.create(external_id)
    for permission in permissions:
        user.add_permission(permission)
    return _stamp(user)


def build_developer(
    created_by_id: str = "auth0|creator",
    developer_id: UUID | None = None,
) -> Developer:
    developer = Developer.create_empty(created_by_id)
    developer.id = developer_id
    return _stamp(developer)


def build_skill(developer: Developer, technology_name: str = "Python") -> DeveloperSkill:
    skill = DeveloperSkill.create(technology_name, 80, developer)
    skill.developer_id = developer.id
    return _stamp(skill)


def build_experience(developer: Developer) -> Experience:
    experience = Experience.create(
        ExperienceType.WORK,
        "Backend Engineer",
        "Built APIs",
        "Remote",
        datetime(2020, 1, 1, tzinfo=UTC),
        datetime(2022, 1, 1, tzinfo=UTC),
        developer,
    )
    experience.developer_id = developer.id
    return _stamp(experience)


def build_project(skill: DeveloperSkill, title: str = "Resume site") -> Project:
    return _stamp(Project.create(title, "A personal resume site", skill))


def build_link(
    developer: Developer,
    network: SocialMediaNetwork = SocialMediaNetwork.GITHUB,
    url: str = "https://github.com/alice",
) -> SocialMediaLink:
    link = SocialMediaLink.create(url, network, developer)
    link.developer_id = developer.id
    return _stamp(link)


class SkillCreateFactory(ModelFactory):
    """Factory for SkillCreate request bodies."""

    __model__ = SkillCreate


class ExperienceCreateFactory(ModelFactory):
    """Factory for ExperienceCreate request bodies."""

    __model__ = ExperienceCreate

    @classmethod
    def end_date(cls) -> None:
        """Leave experiences open-ended."""
        return None


class ProjectCreateFactory(ModelFactory):
    """Factory for ProjectCreate request bodies."""

    __model__ = ProjectCreate


class DeveloperUpdateFactory(ModelFactory):
    """Factory for DeveloperUpdate request bodies."""

    __model__ = DeveloperUpdate


class SkillUpdateFactory(ModelFactory):
    __model__ = SkillUpdate


class ExperienceUpdateFactory(ModelFactory):
    __model__ = ExperienceUpdate

    @classmethod
    def end_date(cls) -> None:
        return None


class ProjectUpdateFactory(ModelFactory):
    __model__ = ProjectUpdate


class SocialLinkCreateFactory(ModelFactory):
    """Factory for SocialLinkCreate request bodies."""

    __model__ = SocialLinkCreate


class AllPermissionGrantFactory(ModelFactory):
    """Factory for All-scope grant request bodies."""

    __model__ = AllPermissionGrant


class SpecificPermissionGrantFactory(ModelFactory):
    """Factory for Specific-scope grant request bodies."""

    __model__ = SpecificPermissionGrant
