from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(field_name, "is required")
    return str(value).strip()


def require_email(value: Optional[str], field_name: str) -> str:
    email = require_non_empty(value, field_name)
    if not EMAIL_PATTERN.match(email):
        raise ValidationError(field_name, "is not a valid email address")
    return email

