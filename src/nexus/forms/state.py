"""Per-form mutable state."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class FormStatus(Enum):
    """Where a form is in its two-state lifecycle."""

    EDITING = "editing"
    SUBMITTED = "submitted"  # Terminal for the form session


@dataclass(slots=True)
class FormState:
    """Field values, field errors, and secret visibility for one form.

    Created fresh when a screen is entered and dropped when it is left.
    Only the owning controller mutates it.
    """

    fields: dict[str, str]
    errors: dict[str, str] = field(default_factory=dict)
    secret_visible: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def empty(cls, field_names: Iterable[str], secret_fields: Iterable[str] = ()) -> FormState:
        """Every field blank, no errors, every secret hidden."""
        return cls(
            fields=dict.fromkeys(field_names, ""),
            secret_visible=dict.fromkeys(secret_fields, False),
        )
