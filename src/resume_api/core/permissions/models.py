"""Permission grant model.

A permission grants its owning user access to a resource type, either
to every instance of it (``All`` scope) or to a single instance
(``Specific`` scope, identified by ``resource_id``).

Examples:
    - resource="Developers", scope=All -> every developer profile
    - resource="Developers", resource_id="3f2c...", scope=Specific -> one profile
"""

from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_api.core.constants import (
    MAX_PERMISSION_RESOURCE_ID_LENGTH,
    MAX_PERMISSION_RESOURCE_LENGTH,
)
from resume_api.core.database.base import Base, TimestampMixin, UUIDMixin
from resume_api.core.errors import ValidationError


if TYPE_CHECKING:
    from resume_api.modules.users.models import User


class PermissionScope(str, Enum):
    """Whether a permission covers all instances of a resource or one of them."""

    ALL = "All"
    SPECIFIC = "Specific"


class Permission(Base, UUIDMixin, TimestampMixin):
    """An immutable access grant owned by exactly one user.

    Instances are created through ``create_all`` and ``create_specific``
    only; the database enforces that ``resource_id`` is set exactly when
    the scope is ``Specific``.

    Attributes:
        user_id: The owning user
        resource: The resource type (e.g., "Developers")
        resource_id: The resource instance, None for ``All`` scope
        scope: ``PermissionScope.ALL`` or ``PermissionScope.SPECIFIC``
    """

    __tablename__ = "permissions"
    __table_args__ = (
        CheckConstraint(
            "(scope = 'All' AND resource_id IS NULL)"
            " OR (scope = 'Specific' AND resource_id IS NOT NULL)",
            name="ck_permission_scope_resource_id",
        ),
        Index("ix_permission_resource_lookup", "resource", "resource_id", "scope"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    resource: Mapped[str] = mapped_column(
        String(MAX_PERMISSION_RESOURCE_LENGTH),
        nullable=False,
    )
    resource_id: Mapped[str | None] = mapped_column(
        String(MAX_PERMISSION_RESOURCE_ID_LENGTH),
        nullable=True,
    )
    scope: Mapped[PermissionScope] = mapped_column(
        SAEnum(
            PermissionScope,
            native_enum=False,
            length=20,
            values_callable=lambda scopes: [scope.value for scope in scopes],
            name="permission_scope",
        ),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="permissions",
    )

    @classmethod
    def create_all(cls, resource: str) -> "Permission":
        """Create a permission covering every instance of a resource type.

        Raises:
            ValidationError: If the resource name is blank
        """
        _require_text(resource, "Resource cannot be empty")
        return cls(resource=resource, resource_id=None, scope=PermissionScope.ALL)

    @classmethod
    def create_specific(cls, resource: str, resource_id: str) -> "Permission":
        """Create a permission covering a single resource instance.

        Raises:
            ValidationError: If the resource name or resource ID is blank
        """
        _require_text(resource, "Resource cannot be empty")
        _require_text(resource_id, "Resource ID cannot be empty")
        return cls(
            resource=resource,
            resource_id=resource_id,
            scope=PermissionScope.SPECIFIC,
        )

    @property
    def is_all(self) -> bool:
        return self.scope == PermissionScope.ALL

    def grants_all(self, resource: str) -> bool:
        """Return True if this is an ``All`` grant on ``resource``."""
        return self.is_all and self.resource == resource

    def grants_specific(self, resource: str, resource_id: str) -> bool:
        """Return True if this is a ``Specific`` grant on exactly this instance."""
        return (
            self.scope == PermissionScope.SPECIFIC
            and self.resource == resource
            and self.resource_id == resource_id
        )

    def __repr__(self) -> str:
        target = "*" if self.is_all else self.resource_id
        return f"<Permission({self.resource}:{target}, user_id={self.user_id})>"


def _require_text(value: str | None, message: str) -> None:
    if value is None or not value.strip():
        raise ValidationError(message)
