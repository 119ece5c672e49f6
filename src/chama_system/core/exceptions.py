from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field`` names the offending input so the presentation layer can highlight it.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "error": self.reason}


class DuplicateEmailError(ValidationError):
    """Raised when an email collides with another identity/slot of the same group."""


class WeakCredentialError(ValidationError):
    """Raised when the chairman secret fails the credential policy."""


class AuthenticationError(DomainError):
    """Raised when an action needs an authenticated identity and there is none."""


class AuthorizationError(DomainError):
    """Raised when an identity lacks the capability for an action."""


class CollaboratorError(DomainError):
    """Base for failures reported by external collaborators."""


class PersistenceError(CollaboratorError):
    """Raised when the persistence collaborator could not store the registration."""


class InvitationError(CollaboratorError):
    """Raised when an activation invitation could not be delivered."""


class DocumentStorageError(CollaboratorError):
    """Raised when the upload collaborator could not store a document."""


class InvalidRoleError(Exception):
    """Raised for a role outside the closed enumeration.

    Programming error, not user-facing.
    """

    def __init__(self, role: Any):
        super().__init__(f"Unknown role: {role!r}")
        self.role = role
