"""User database models."""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_api.core.constants import DEVELOPERS_RESOURCE, MAX_EXTERNAL_ID_LENGTH
from resume_api.core.database.base import Base, TimestampMixin, UUIDMixin
from resume_api.core.errors import ValidationError


if TYPE_CHECKING:
    from resume_api.core.permissions.models import Permission


class User(Base, UUIDMixin, TimestampMixin):
    """A user known to the system through the identity provider.

    Users are created lazily the first time an external ID is seen by
    an authorization check or a permission grant. A user owns its
    permissions; deleting the user deletes them.

    The ``permissions`` collection is never lazy loaded. Load it with
    ``UserRepository.get_by_external_id(..., include_permissions=True)``
    before calling ``has_permission``.

    Attributes:
        external_id: Subject identifier issued by the identity provider
        permissions: Grants owned by this user
    """

    __tablename__ = "users"

    external_id: Mapped[str] = mapped_column(
        String(MAX_EXTERNAL_ID_LENGTH),
        nullable=False,
        unique=True,
        index=True,
    )

    # Relationships
    permissions: Mapped[list["Permission"]] = relationship(
        "Permission",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )

    @classmethod
    def create(cls, external_id: str) -> "User":
        """Create a new user with no permissions.

        Raises:
            ValidationError: If the external ID is blank
        """
        if not external_id or not external_id.strip():
            raise ValidationError("External ID cannot be empty")
        return cls(external_id=external_id, permissions=[])

    def add_permission(self, permission: "Permission") -> None:
        """Add a grant. Duplicate grants are kept as-is."""
        self.permissions.append(permission)

    def remove_permission(self, resource: str, resource_id: str) -> None:
        """Remove the first ``Specific`` grant on exactly this instance.

        ``All`` grants are never removed here. Does nothing when no
        matching grant exists.
        """
        for permission in self.permissions:
            if permission.grants_specific(resource, resource_id):
                self.permissions.remove(permission)
                return

    def has_permission(self, resource: str, resource_id: str | None = None) -> bool:
        """Check whether the user holds a grant on a resource.

        An ``All`` grant on the resource type matches any ``resource_id``.
        Without a ``resource_id`` only an ``All`` grant matches.
        """
        if any(permission.grants_all(resource) for permission in self.permissions):
            return True

        if resource_id is not None:
            return any(
                permission.grants_specific(resource, resource_id)
                for permission in self.permissions
            )

        return False

    def has_developer_access(self, developer_id: str | None = None) -> bool:
        return self.has_permission(DEVELOPERS_RESOURCE, developer_id)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, external_id={self.external_id})>"
