"""Integration tests for user and permission persistence."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from resume_api.core.constants import DEVELOPERS_RESOURCE
from resume_api.core.permissions import Permission, PermissionScope
from resume_api.modules.users.models import User
from resume_api.modules.users.repos import PermissionRepository, UserRepository
from resume_api.modules.users.services import PermissionService, UserService


pytestmark = pytest.mark.integration


def services(db: AsyncSession) -> tuple[UserService, PermissionService]:
    user_repo = UserRepository(db)
    users = UserService(repo=user_repo)
    permissions = PermissionService(
        users=users,
        user_repo=user_repo,
        permission_repo=PermissionRepository(db),
    )
    return users, permissions


async def count_users(db: AsyncSession, external_id: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(User).where(User.external_id == external_id)
    )
    return result.scalar_one()


async def specific_grants(db: AsyncSession, resource_id: str) -> list[Permission]:
    result = await db.execute(
        select(Permission).where(
            Permission.resource == DEVELOPERS_RESOURCE,
            Permission.resource_id == resource_id,
        )
    )
    return list(result.scalars().all())


class TestGetOrCreateUser:
    """Tests for get-or-create against the database."""

    async def test_repeated_calls_return_the_same_row(self, db: AsyncSession):
        users, _ = services(db)

        first = await users.get_or_create_user("auth0|alice")
        second = await users.get_or_create_user("auth0|alice")

        assert first.id is not None
        assert first.id == second.id
        assert await count_users(db, "auth0|alice") == 1

    async def test_new_user_with_permissions_starts_empty(self, db: AsyncSession):
        users, _ = services(db)

        user = await users.get_or_create_user_including_permissions("auth0|new")

        assert user.permissions == []
        assert not user.has_developer_access()

    async def test_register_conflict_returns_existing_row(self, db: AsyncSession):
        repo = UserRepository(db)
        existing = await repo.register(User.create("auth0|racy"))

        winner = await repo.register(User.create("auth0|racy"))

        assert winner.id == existing.id
        assert await count_users(db, "auth0|racy") == 1


class TestPermissionPersistence:
    """Tests for grants and bulk revoke against the database."""

    async def test_grants_are_loaded_with_the_user(self, db: AsyncSession):
        _, permissions = services(db)
        await permissions.give_user_specific_permission("auth0|bob", DEVELOPERS_RESOURCE, "dev-1")
        db.expunge_all()

        user = await UserRepository(db).get_by_external_id("auth0|bob", include_permissions=True)

        assert user is not None
        assert user.has_developer_access("dev-1")
        assert not user.has_developer_access("dev-2")

    async def test_get_by_id_loads_grants(self, db: AsyncSession):
        users, permissions = services(db)
        await permissions.give_user_all_permission("auth0|bob", DEVELOPERS_RESOURCE)
        user_id = (await users.get_or_create_user("auth0|bob")).id
        db.expunge_all()

        user = await UserRepository(db).get_by_id(user_id)

        assert user is not None
        assert user.external_id == "auth0|bob"
        assert user.has_developer_access()

    async def test_all_grant_covers_developers_created_later(self, db: AsyncSession):
        _, permissions = services(db)
        await permissions.give_user_all_permission("auth0|bob", DEVELOPERS_RESOURCE)
        db.expunge_all()

        user = await UserRepository(db).get_by_external_id("auth0|bob", include_permissions=True)

        assert user is not None
        assert user.has_developer_access("created-after-the-grant")

    async def test_revoke_removes_specific_grants_for_every_user(self, db: AsyncSession):
        _, permissions = services(db)
        await permissions.give_user_specific_permission("auth0|bob", DEVELOPERS_RESOURCE, "dev-1")
        await permissions.give_user_specific_permission("auth0|carol", DEVELOPERS_RESOURCE, "dev-1")
        await permissions.give_user_specific_permission("auth0|carol", DEVELOPERS_RESOURCE, "dev-2")
        await permissions.give_user_all_permission("auth0|dave", DEVELOPERS_RESOURCE)

        removed = await permissions.remove_specific_permission_from_all_users(
            DEVELOPERS_RESOURCE, "dev-1"
        )

        assert removed == 2
        assert await specific_grants(db, "dev-1") == []
        assert len(await specific_grants(db, "dev-2")) == 1
        result = await db.execute(
            select(Permission).where(Permission.scope == PermissionScope.ALL)
        )
        assert len(result.scalars().all()) == 1

    async def test_revoke_without_matches_removes_nothing(self, db: AsyncSession):
        _, permissions = services(db)

        assert (
            await permissions.remove_specific_permission_from_all_users(
                DEVELOPERS_RESOURCE, "missing"
            )
            == 0
        )


class TestLookupWithoutPermissions:
    """Tests for lookups that skip loading grants."""

    async def test_grants_collection_starts_empty_and_tracks_appends(self, db: AsyncSession):
        _, permissions = services(db)
        await permissions.give_user_specific_permission("auth0|erin", DEVELOPERS_RESOURCE, "dev-1")
        db.expunge_all()

        user = await UserRepository(db).get_by_external_id("auth0|erin")
        assert user is not None
        assert user.permissions == []

        user.add_permission(Permission.create_specific(DEVELOPERS_RESOURCE, "dev-2"))
        await UserRepository(db).update(user)
        db.expunge_all()

        reloaded = await UserRepository(db).get_by_external_id(
            "auth0|erin", include_permissions=True
        )
        assert reloaded is not None
        assert reloaded.has_developer_access("dev-1")
        assert reloaded.has_developer_access("dev-2")
