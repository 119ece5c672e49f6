from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_MIN_SECRET_LENGTH
from ..core.exceptions import ValidationError, WeakCredentialError


@dataclass(frozen=True)
class CredentialPolicy:
    """Minimum strength for a credential secret (configured via MIN_SECRET_LENGTH)."""

    min_length: int = DEFAULT_MIN_SECRET_LENGTH

    def check(self, secret: Optional[str], field_name: str) -> str:
        if secret is None or secret == "":
            raise ValidationError(field_name, "is required")
        if not secret.strip():
            raise WeakCredentialError(field_name, "must not be blank")
        if len(secret) < self.min_length:
            raise WeakCredentialError(field_name, f"must be at least {self.min_length} characters")
        return secret
