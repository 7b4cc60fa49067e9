"""Unit tests for the developer accessor family.

The user service is mocked; each test decides which grants the acting
user holds.
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from resume_api.core.constants import DEVELOPERS_RESOURCE
from resume_api.core.errors import AccessDeniedError, NotFoundError
from resume_api.core.permissions import Permission
from resume_api.modules.developers.accessors import (
    DeveloperAccessor,
    DeveloperSkillAccessor,
    ExperienceAccessor,
    ProjectAccessor,
)
from resume_api.modules.users.models import User
from resume_api.modules.users.services import UserService
from tests.factories import (
    build_developer,
    build_experience,
    build_project,
    build_skill,
    build_user,
)


pytestmark = pytest.mark.unit

CREATOR = "auth0|alice"
STRANGER = "auth0|bob"


def accessor_for(user: User) -> DeveloperAccessor:
    users = AsyncMock(spec=UserService)
    users.get_or_create_user_including_permissions.return_value = user
    return DeveloperAccessor(users=users)


class TestDeveloperAccessorCheckAccess:
    """Tests for DeveloperAccessor.check_access."""

    async def test_missing_developer_raises_not_found(self):
        accessor = accessor_for(build_user(STRANGER))

        with pytest.raises(NotFoundError) as exc_info:
            await accessor.check_access(None, "dev-1", STRANGER)

        assert exc_info.value.details["resource_id"] == "dev-1"

    async def test_missing_developer_does_not_resolve_user(self):
        accessor = accessor_for(build_user(STRANGER))

        with pytest.raises(NotFoundError):
            await accessor.check_access(None, "dev-1", STRANGER)

        accessor.users.get_or_create_user_including_permissions.assert_not_awaited()

    async def test_creator_without_grants_is_allowed(self):
        developer = build_developer(CREATOR)
        accessor = accessor_for(build_user(CREATOR))

        result = await accessor.check_access(developer, str(developer.id), CREATOR)

        assert result is developer

    async def test_stranger_is_denied(self):
        developer = build_developer(CREATOR)
        accessor = accessor_for(build_user(STRANGER))

        with pytest.raises(AccessDeniedError) as exc_info:
            await accessor.check_access(developer, str(developer.id), STRANGER)

        assert exc_info.value.status_code == 401
        assert exc_info.value.details == {
            "user_id": STRANGER,
            "developer_id": str(developer.id),
        }

    async def test_specific_grant_allows_only_that_developer(self):
        developer = build_developer(CREATOR)
        other = build_developer(CREATOR)
        user = build_user(
            STRANGER, Permission.create_specific(DEVELOPERS_RESOURCE, str(developer.id))
        )
        accessor = accessor_for(user)

        assert await accessor.check_access(developer, str(developer.id), STRANGER) is developer
        with pytest.raises(AccessDeniedError):
            await accessor.check_access(other, str(other.id), STRANGER)

    async def test_all_grant_allows_every_developer(self):
        accessor = accessor_for(build_user(STRANGER, Permission.create_all(DEVELOPERS_RESOURCE)))

        for developer in (build_developer(CREATOR), build_developer("auth0|carol")):
            assert await accessor.check_access(developer, str(developer.id), STRANGER) is developer

    async def test_user_is_resolved_with_permissions(self):
        developer = build_developer(CREATOR)
        accessor = accessor_for(build_user(CREATOR))

        await accessor.check_access(developer, str(developer.id), CREATOR)

        accessor.users.get_or_create_user_including_permissions.assert_awaited_once_with(CREATOR)


class TestDeveloperAccessorScenario:
    """A stranger gains access as grants are added."""

    async def test_grants_open_access_step_by_step(self):
        developer = build_developer(CREATOR)
        bob = build_user(STRANGER)
        accessor = accessor_for(bob)

        with pytest.raises(AccessDeniedError):
            await accessor.check_access(developer, str(developer.id), STRANGER)

        bob.add_permission(Permission.create_specific(DEVELOPERS_RESOURCE, str(developer.id)))
        assert await accessor.check_access(developer, str(developer.id), STRANGER) is developer

        later = build_developer(CREATOR)
        with pytest.raises(AccessDeniedError):
            await accessor.check_access(later, str(later.id), STRANGER)

        bob.add_permission(Permission.create_all(DEVELOPERS_RESOURCE))
        newest = build_developer("auth0|carol")
        assert await accessor.check_access(later, str(later.id), STRANGER) is later
        assert await accessor.check_access(newest, str(newest.id), STRANGER) is newest


class TestDeveloperAccessorFilterAccessible:
    """Tests for DeveloperAccessor.filter_accessible."""

    async def test_all_grant_returns_every_developer(self):
        developers = [build_developer(CREATOR) for _ in range(3)]
        accessor = accessor_for(build_user(STRANGER, Permission.create_all(DEVELOPERS_RESOURCE)))

        result = await accessor.filter_accessible(developers, STRANGER)

        assert result == developers

    async def test_keeps_accessible_subset_in_order(self):
        developers = [build_developer(CREATOR) for _ in range(5)]
        own = build_developer(STRANGER)
        developers.insert(2, own)
        granted = [developers[0], developers[4]]
        user = build_user(
            STRANGER,
            *(Permission.create_specific(DEVELOPERS_RESOURCE, str(d.id)) for d in granted),
        )
        accessor = accessor_for(user)

        result = await accessor.filter_accessible(developers, STRANGER)

        assert result == [developers[0], own, developers[4]]

    async def test_filter_matches_check_access(self):
        developers = [build_developer(CREATOR) for _ in range(4)]
        user = build_user(
            STRANGER, Permission.create_specific(DEVELOPERS_RESOURCE, str(developers[1].id))
        )
        accessor = accessor_for(user)

        allowed = []
        for developer in developers:
            try:
                allowed.append(await accessor.check_access(developer, str(developer.id), STRANGER))
            except AccessDeniedError:
                pass

        assert await accessor.filter_accessible(developers, STRANGER) == allowed

    async def test_user_is_resolved_once(self):
        developers = [build_developer(CREATOR) for _ in range(3)]
        accessor = accessor_for(build_user(STRANGER))

        assert await accessor.filter_accessible(developers, STRANGER) == []
        accessor.users.get_or_create_user_including_permissions.assert_awaited_once_with(STRANGER)


class TestOwnedResourceAccessors:
    """Tests for the skill and experience accessors."""

    @pytest.fixture(params=["skill", "experience"])
    def case(self, request):
        """Yield (accessor class, builder) for each owned resource kind."""
        if request.param == "skill":
            return DeveloperSkillAccessor, build_skill
        return ExperienceAccessor, build_experience

    async def test_missing_entity_raises_not_found(self, case):
        accessor_cls, _ = case
        accessor = accessor_cls(developers=accessor_for(build_user(CREATOR)))

        with pytest.raises(NotFoundError):
            await accessor.check_access(None, str(uuid4()), CREATOR)

    async def test_entity_without_developer_raises_not_found(self, case):
        accessor_cls, build = case
        entity = build(build_developer(CREATOR))
        entity.developer = None
        accessor = accessor_cls(developers=accessor_for(build_user(CREATOR)))

        with pytest.raises(NotFoundError):
            await accessor.check_access(entity, str(uuid4()), CREATOR)

    async def test_owner_is_allowed(self, case):
        accessor_cls, build = case
        developer = build_developer(CREATOR)
        entity = build(developer)
        accessor = accessor_cls(developers=accessor_for(build_user(CREATOR)))

        assert await accessor.check_access(entity, str(developer.id), CREATOR) is entity

    async def test_mismatched_developer_is_denied_even_with_full_access(self, case):
        accessor_cls, build = case
        developer = build_developer(CREATOR)
        entity = build(developer)
        developers = accessor_for(
            build_user(CREATOR, Permission.create_all(DEVELOPERS_RESOURCE))
        )
        accessor = accessor_cls(developers=developers)

        with pytest.raises(AccessDeniedError):
            await accessor.check_access(entity, str(uuid4()), CREATOR)

        # Ownership is checked before the user is resolved
        developers.users.get_or_create_user_including_permissions.assert_not_awaited()

    async def test_stranger_is_denied(self, case):
        accessor_cls, build = case
        developer = build_developer(CREATOR)
        entity = build(developer)
        accessor = accessor_cls(developers=accessor_for(build_user(STRANGER)))

        with pytest.raises(AccessDeniedError):
            await accessor.check_access(entity, str(developer.id), STRANGER)

    async def test_specific_grant_on_parent_allows(self, case):
        accessor_cls, build = case
        developer = build_developer(CREATOR)
        entity = build(developer)
        user = build_user(
            STRANGER, Permission.create_specific(DEVELOPERS_RESOURCE, str(developer.id))
        )
        accessor = accessor_cls(developers=accessor_for(user))

        assert await accessor.check_access(entity, str(developer.id), STRANGER) is entity


class TestProjectAccessor:
    """Tests for ProjectAccessor.check_access."""

    def accessor(self, user: User) -> ProjectAccessor:
        return ProjectAccessor(skills=DeveloperSkillAccessor(developers=accessor_for(user)))

    async def test_missing_project_raises_not_found(self):
        with pytest.raises(NotFoundError):
            await self.accessor(build_user(CREATOR)).check_access(None, CREATOR)

    async def test_project_without_skills_raises_not_found(self):
        project = build_project(build_skill(build_developer(CREATOR)))
        project.developer_skills = []

        with pytest.raises(NotFoundError):
            await self.accessor(build_user(CREATOR)).check_access(project, CREATOR)

    async def test_skill_without_developer_raises_not_found(self):
        skill = build_skill(build_developer(CREATOR))
        project = build_project(skill)
        skill.developer = None

        with pytest.raises(NotFoundError):
            await self.accessor(build_user(CREATOR)).check_access(project, CREATOR)

    async def test_creator_of_first_skills_developer_is_allowed(self):
        project = build_project(build_skill(build_developer(CREATOR)))

        assert await self.accessor(build_user(CREATOR)).check_access(project, CREATOR) is project

    async def test_access_follows_the_first_skill_only(self):
        first = build_skill(build_developer(CREATOR))
        second = build_skill(build_developer(STRANGER))
        project = build_project(first)
        project.developer_skills.append(second)

        with pytest.raises(AccessDeniedError):
            await self.accessor(build_user(STRANGER)).check_access(project, STRANGER)

    async def test_specific_grant_on_developer_allows(self):
        developer = build_developer(CREATOR)
        project = build_project(build_skill(developer))
        user = build_user(
            STRANGER, Permission.create_specific(DEVELOPERS_RESOURCE, str(developer.id))
        )

        assert await self.accessor(user).check_access(project, STRANGER) is project
