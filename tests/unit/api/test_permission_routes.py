"""Route tests for the admin permission endpoints."""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from resume_api.core.constants import DEVELOPERS_RESOURCE
from resume_api.modules.users.services import PermissionService
from tests.factories import AllPermissionGrantFactory, SpecificPermissionGrantFactory


pytestmark = pytest.mark.unit


@pytest.fixture
def permission_service(app) -> AsyncMock:
    service = AsyncMock(spec=PermissionService)
    app.dependency_overrides[PermissionService] = lambda: service
    return service


class TestAdminRequirement:
    """Permission endpoints require the admin claim."""

    async def test_non_admin_is_forbidden(
        self, client: AsyncClient, auth_headers, permission_service
    ):
        response = await client.post(
            "/api/v1/permissions/all",
            json=AllPermissionGrantFactory.build().model_dump(),
            headers=auth_headers("auth0|alice"),
        )

        assert response.status_code == 403
        body = response.json()
        assert body["type"].endswith("/admin_required")
        assert body["required_permission"] == "Admin:access"
        permission_service.give_user_all_permission.assert_not_awaited()

    async def test_anonymous_is_unauthorized(self, client: AsyncClient, permission_service):
        response = await client.delete(
            "/api/v1/permissions/specific",
            params={"resource": DEVELOPERS_RESOURCE, "resource_id": "dev-1"},
        )

        assert response.status_code == 401


class TestGrantRoutes:
    """Tests for granting permissions."""

    async def test_grant_all(self, client: AsyncClient, admin_headers, permission_service):
        data = AllPermissionGrantFactory.build()

        response = await client.post(
            "/api/v1/permissions/all", json=data.model_dump(), headers=admin_headers
        )

        assert response.status_code == 204
        permission_service.give_user_all_permission.assert_awaited_once_with(
            data.external_user_id, data.resource
        )

    async def test_grant_specific(self, client: AsyncClient, admin_headers, permission_service):
        data = SpecificPermissionGrantFactory.build()

        response = await client.post(
            "/api/v1/permissions/specific", json=data.model_dump(), headers=admin_headers
        )

        assert response.status_code == 204
        permission_service.give_user_specific_permission.assert_awaited_once_with(
            data.external_user_id, data.resource, data.resource_id
        )

    async def test_grant_specific_requires_resource_id(
        self, client: AsyncClient, admin_headers, permission_service
    ):
        response = await client.post(
            "/api/v1/permissions/specific",
            json={"external_user_id": "auth0|bob", "resource": DEVELOPERS_RESOURCE},
            headers=admin_headers,
        )

        assert response.status_code == 422
        permission_service.give_user_specific_permission.assert_not_awaited()


class TestRevokeRoute:
    """Tests for revoking Specific grants from all users."""

    async def test_revoke_specific(self, client: AsyncClient, admin_headers, permission_service):
        permission_service.remove_specific_permission_from_all_users.return_value = 2

        response = await client.delete(
            "/api/v1/permissions/specific",
            params={"resource": DEVELOPERS_RESOURCE, "resource_id": "dev-1"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "resource": DEVELOPERS_RESOURCE,
            "resource_id": "dev-1",
            "removed": 2,
        }
        permission_service.remove_specific_permission_from_all_users.assert_awaited_once_with(
            DEVELOPERS_RESOURCE, "dev-1"
        )
