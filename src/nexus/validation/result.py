"""Validation result — immutable container for field failures."""

from dataclasses import dataclass, field

from nexus.errors import ErrorKind, FieldValidationFailure


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating a form snapshot against the field rules.

    ``is_valid`` is True when no field failed.
    The result is falsy when invalid, so you can write::

        result = validate(form.fields, form.field_names)
        if not result:
            show(result.errors)

    ``failures`` holds one ``FieldValidationFailure`` per failing field,
    in the order the fields were checked. ``errors`` is the same thing as
    a plain ``{field: message}`` mapping::

        {"email": "Email is invalid",
         "password": "Password must be at least 6 characters"}
    """

    failures: dict[str, FieldValidationFailure] = field(default_factory=dict)

    @property
    def errors(self) -> dict[str, str]:
        """Field name to the message of its first failing rule."""
        return {name: failure.message for name, failure in self.failures.items()}

    @property
    def kinds(self) -> dict[str, ErrorKind]:
        """Field name to the kind of its first failing rule."""
        return {name: failure.kind for name, failure in self.failures.items()}

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.failures

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid

    def __contains__(self, field_name: object) -> bool:
        return field_name in self.failures
