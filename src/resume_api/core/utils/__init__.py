"""Small shared helpers."""

from resume_api.core.utils.ids import canonical_id, parse_id


__all__ = ["canonical_id", "parse_id"]
