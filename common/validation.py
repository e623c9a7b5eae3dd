import re
from typing import Any

from common.exceptions import ValidationError

# Canonical hyphenated UUID, the id format Postgres hands out for our tables.
_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_id(value: Any) -> bool:
    return isinstance(value, str) and bool(_ID_PATTERN.fullmatch(value))


def require_field(value: Any, field_name: str) -> None:
    """Raise ValidationError when a required body field is absent or empty."""
    if not value:
        raise ValidationError(f"Missing `{field_name}` in request body")


def require_valid_id(value: Any, field_name: str = "id") -> None:
    """Raise ValidationError when ``value`` is not a well-formed identifier."""
    if not is_valid_id(value):
        raise ValidationError(f"The `{field_name}` is not valid")
