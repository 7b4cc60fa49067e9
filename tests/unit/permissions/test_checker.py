"""Unit tests for the pure access checks."""

import pytest

from resume_api.core.constants import DEVELOPERS_RESOURCE
from resume_api.core.permissions import Permission, can_access_developer, can_access_resource
from tests.factories import build_user


pytestmark = pytest.mark.unit


class TestCanAccessResource:
    """Tests for can_access_resource."""

    def test_all_grant_allows(self):
        user = build_user("auth0|bob", Permission.create_all(DEVELOPERS_RESOURCE))

        assert can_access_resource(user, DEVELOPERS_RESOURCE, "dev-1", "auth0|alice")

    def test_specific_grant_allows_its_instance(self):
        user = build_user("auth0|bob", Permission.create_specific(DEVELOPERS_RESOURCE, "dev-1"))

        assert can_access_resource(user, DEVELOPERS_RESOURCE, "dev-1", "auth0|alice")
        assert not can_access_resource(user, DEVELOPERS_RESOURCE, "dev-2", "auth0|alice")

    def test_creator_is_allowed_without_grants(self):
        user = build_user("auth0|alice")

        assert can_access_resource(user, DEVELOPERS_RESOURCE, "dev-1", "auth0|alice")

    def test_stranger_is_denied(self):
        user = build_user("auth0|bob")

        assert not can_access_resource(user, DEVELOPERS_RESOURCE, "dev-1", "auth0|alice")

    def test_missing_creator_never_matches(self):
        user = build_user("auth0|bob")

        assert not can_access_resource(user, DEVELOPERS_RESOURCE, "dev-1", None)


class TestCanAccessDeveloper:
    """Tests for can_access_developer."""

    def test_checks_the_developers_resource(self):
        user = build_user("auth0|bob", Permission.create_all("Projects"))

        assert not can_access_developer(user, "dev-1", "auth0|alice")

    def test_specific_developer_grant(self):
        user = build_user("auth0|bob", Permission.create_specific(DEVELOPERS_RESOURCE, "dev-1"))

        assert can_access_developer(user, "dev-1", "auth0|alice")
