"""Built-in validation rules for the entry forms.

A rule pairs a check with the error it reports::

    Rule(kind=ErrorKind.REQUIRED, message="Name is required", check=...)

The check receives the field's value and the whole form snapshot, and
returns True when the value passes. The snapshot is there for cross-field
rules such as ``equals_field("password")``.

Each field gets an ordered tuple of rules. ``validate()`` runs them in
order and stops at the first failure, so a presence rule always comes
first and suppresses the format checks behind it.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from nexus.errors import ErrorKind, FieldValidationFailure

# Type alias for a rule's predicate
type Check = Callable[[str, Mapping[str, str]], bool]


@dataclass(frozen=True, slots=True)
class Rule:
    """One predicate/message pair."""

    kind: ErrorKind
    message: str
    check: Check

    def __call__(
        self, field: str, value: str, data: Mapping[str, str]
    ) -> FieldValidationFailure | None:
        """Return the failure for *field*, or None if *value* passes."""
        if self.check(value, data):
            return None
        return FieldValidationFailure(field=field, kind=self.kind, message=self.message)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(message: str = "This field is required") -> Rule:
    """Value must be non-empty. Whitespace counts as content."""
    return Rule(ErrorKind.REQUIRED, message, lambda value, _data: bool(value))


def required_text(message: str = "This field is required") -> Rule:
    """Value must be non-empty after trimming whitespace."""
    return Rule(ErrorKind.REQUIRED, message, lambda value, _data: bool(value.strip()))


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Something, an @, something, a dot, something. Searched, not anchored.
_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")


def email_format(message: str = "Must be a valid email address") -> Rule:
    """Value must look like an email address (basic shape check)."""
    return Rule(
        ErrorKind.INVALID_FORMAT,
        message,
        lambda value, _data: _EMAIL_RE.search(value) is not None,
    )


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(n: int, message: str | None = None) -> Rule:
    """String must be at least *n* characters."""
    return Rule(
        ErrorKind.TOO_SHORT,
        message or f"Must be at least {n} characters",
        lambda value, _data: len(value) >= n,
    )


# ---------------------------------------------------------------------------
# Cross-field
# ---------------------------------------------------------------------------


def equals_field(other: str, message: str | None = None) -> Rule:
    """Value must equal the *other* field's value exactly (case-sensitive)."""
    return Rule(
        ErrorKind.MISMATCH,
        message or f"Must match {other}",
        lambda value, data: value == (data.get(other) or ""),
    )


# ---------------------------------------------------------------------------
# Field table
# ---------------------------------------------------------------------------


def field_rules(min_password_length: int = 6) -> dict[str, tuple[Rule, ...]]:
    """Build the rule table for every field either entry form can carry.

    The email is not trimmed before its presence check; name, degree and
    company are.
    """
    return {
        "name": (required_text("Name is required"),),
        "email": (
            required("Email is required"),
            email_format("Email is invalid"),
        ),
        "password": (
            required("Password is required"),
            min_length(
                min_password_length,
                f"Password must be at least {min_password_length} characters",
            ),
        ),
        "confirm_password": (
            required("Please confirm your password"),
            equals_field("password", "Passwords do not match"),
        ),
        "graduation_year": (required("Graduation year is required"),),
        "degree": (required_text("Degree is required"),),
        "company": (required_text("Company is required"),),
    }


FIELD_RULES: dict[str, tuple[Rule, ...]] = field_rules()
