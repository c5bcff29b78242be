"""Form validation — ordered rules, first failure wins.

Usage::

    from nexus.validation import validate

    result = validate(
        {"email": "ada@example.com", "password": "hunter2"},
        ("email", "password"),
    )
    if not result:
        show(result.errors)  # {"field": "message"}
"""

from collections.abc import Iterable, Mapping

from nexus.errors import FieldValidationFailure, UnknownFieldError
from nexus.validation.result import ValidationResult
from nexus.validation.rules import (
    FIELD_RULES,
    Check,
    Rule,
    email_format,
    equals_field,
    field_rules,
    min_length,
    required,
    required_text,
)

__all__ = [
    "FIELD_RULES",
    "Check",
    "Rule",
    "ValidationResult",
    "email_format",
    "equals_field",
    "field_rules",
    "min_length",
    "required",
    "required_text",
    "validate",
]


def validate(
    data: Mapping[str, str],
    fields: Iterable[str],
    rules: Mapping[str, tuple[Rule, ...]] | None = None,
) -> ValidationResult:
    """Validate a form snapshot.

    Args:
        data: Field names to current string values. A field in *fields*
            that is missing from *data* is checked as the empty string.
        fields: The fields to check, in the order failures are reported.
        rules: Field names to ordered rule tuples. Defaults to
            ``FIELD_RULES``.

    Returns:
        A ``ValidationResult`` holding exactly the fields that failed,
        each with the failure of its first failing rule.

    Raises:
        UnknownFieldError: A field in *fields* has no entry in *rules*.

    Example::

        result = validate({"email": "a@b", "password": "abcdef"},
                          ("email", "password"))
        # result.errors == {"email": "Email is invalid"}
    """
    table = FIELD_RULES if rules is None else rules
    failures: dict[str, FieldValidationFailure] = {}

    for field_name in fields:
        try:
            chain = table[field_name]
        except KeyError:
            raise UnknownFieldError(field_name, tuple(table)) from None

        value = data.get(field_name) or ""
        for rule in chain:
            failure = rule(field_name, value, data)
            if failure is not None:
                failures[field_name] = failure
                break

    return ValidationResult(failures=failures)
