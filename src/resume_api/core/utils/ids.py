"""Identifier parsing helpers."""

from uuid import UUID

from resume_api.core.errors import BadRequestError


def parse_id(value: str, resource: str = "resource") -> UUID:
    """Parse a path identifier as a UUID.

    Args:
        value: The raw identifier from the request path
        resource: Resource name used in the error message

    Returns:
        The parsed UUID

    Raises:
        BadRequestError: If the value is not a valid UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError) as exc:
        raise BadRequestError(
            f"Invalid {resource} ID format: {value}",
            error_code="invalid_id_format",
            details={"id": value},
        ) from exc


def canonical_id(value: str, resource: str = "resource") -> str:
    """Parse a path identifier and return its canonical hyphenated form.

    ``UUID`` accepts upper-case, unhyphenated, braced and ``urn:uuid:``
    spellings. Grants and ownership checks compare identifiers as
    strings, so every spelling is reduced to ``str(UUID)`` first.

    Raises:
        BadRequestError: If the value is not a valid UUID
    """
    return str(parse_id(value, resource))
