"""Nexus exception hierarchy.

Shared across validation, forms, session, and catalog so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from enum import StrEnum


class NexusError(Exception):
    """Base for all nexus-specific errors."""


class ConfigurationError(NexusError):
    """Raised when configuration is invalid.

    Typically raised from ``NexusConfig.__post_init__`` or when a
    session signer is created without a secret key.
    """


class UnknownFieldError(NexusError, KeyError):
    """A field name outside a form's fixed field set, or with no rules."""

    def __init__(self, field: str, known: tuple[str, ...] = ()) -> None:
        self.field = field
        self.known = known
        super().__init__(field)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown field {self.field!r}. Known fields: {', '.join(self.known)}"
        return f"Unknown field {self.field!r}"


class FormClosedError(NexusError):
    """The form already reached its terminal submitted state."""


class RecordNotFound(NexusError, LookupError):  # noqa: N818
    """Catalog lookup by an id that does not exist."""

    def __init__(self, kind: str, record_id: int) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"No {kind} with id {record_id}")


class ErrorKind(StrEnum):
    """What a failing rule checked."""

    REQUIRED = "required"
    INVALID_FORMAT = "invalid format"
    TOO_SHORT = "too short"
    MISMATCH = "mismatch"


@dataclass(frozen=True, slots=True)
class FieldValidationFailure:
    """One field that failed validation.

    Carried by ``ValidationResult``, never raised. ``message`` is the
    text shown next to the field.
    """

    field: str
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
