"""Form controller — the edit/submit state machine shared by the entry forms.

A controller owns one ``FormState`` and reacts to four kinds of event:
a field changed, a choice was selected, a secret's visibility was toggled,
and the form was submitted. Validation only runs on submit.

On a successful submit the controller marks the session authenticated,
then asks the navigator for the landing view, exactly once each, and the
form becomes terminal. On a failed submit the error map is stored for
re-rendering and the form stays editable.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar

from nexus.config import NexusConfig
from nexus.errors import FormClosedError, UnknownFieldError
from nexus.forms.events import FormEvent, FormEventBus, FormOutcome, form_events
from nexus.forms.state import FormState, FormStatus
from nexus.navigation import Navigator
from nexus.session import Authenticatable
from nexus.validation import ValidationResult, field_rules, validate

logger = logging.getLogger("nexus.forms")


class FormController:
    """Base for the sign-in and registration forms.

    Subclasses declare their field set::

        class SignInForm(FormController):
            form_name = "signin"
            field_names = ("email", "password")
            secret_fields = ("password",)
            success_message = "Login successful!"
    """

    form_name: ClassVar[str] = "form"
    field_names: ClassVar[tuple[str, ...]] = ()
    secret_fields: ClassVar[tuple[str, ...]] = ()
    choice_fields: ClassVar[tuple[str, ...]] = ()
    success_message: ClassVar[str] = ""

    __slots__ = ("_config", "_events", "_navigator", "_rules", "_session", "state", "status")

    def __init__(
        self,
        session: Authenticatable,
        navigator: Navigator,
        config: NexusConfig | None = None,
        *,
        events: FormEventBus | None = None,
    ) -> None:
        self._session = session
        self._navigator = navigator
        self._config = config or NexusConfig()
        self._events = form_events if events is None else events
        self._rules = field_rules(self._config.min_password_length)
        self.state = FormState.empty(self.field_names, self.secret_fields)
        self.status = FormStatus.EDITING

    # -- Read access --

    @property
    def fields(self) -> Mapping[str, str]:
        return MappingProxyType(self.state.fields)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self.state.errors)

    @property
    def is_submitted(self) -> bool:
        return self.status is FormStatus.SUBMITTED

    def is_secret_visible(self, field: str) -> bool:
        self._check_secret(field)
        return self.state.secret_visible[field]

    # -- Events --

    def on_field_change(self, field: str, value: str) -> None:
        """Store *value* and drop any error *field* was showing.

        The error goes away whether or not the new value is valid;
        it comes back only on the next submit.
        """
        self._ensure_editing()
        if field not in self.state.fields:
            raise UnknownFieldError(field, self.field_names)
        self.state.fields[field] = value
        self.state.errors.pop(field, None)

    def on_selection_change(self, field: str, value: str) -> None:
        """``on_field_change`` for fields picked from a fixed set of options."""
        if field not in self.choice_fields:
            raise UnknownFieldError(field, self.choice_fields)
        self.on_field_change(field, value)

    def toggle_secret_visibility(self, field: str | None = None) -> bool:
        """Flip whether a secret field is shown in clear. Returns the new flag.

        Defaults to the form's first secret field.
        """
        if field is None:
            field = self.secret_fields[0]
        self._check_secret(field)
        visible = not self.state.secret_visible[field]
        self.state.secret_visible[field] = visible
        return visible

    def validate(self) -> ValidationResult:
        """Validate the current values without changing any state."""
        return validate(self.state.fields, self.field_names, self._rules)

    def on_submit(self) -> ValidationResult:
        """Validate everything and either reject or complete the form."""
        self._ensure_editing()
        result = self.validate()

        if not result:
            self.state.errors = result.errors
            logger.debug(
                "%s submission rejected: %s",
                self.form_name,
                ", ".join(result.failures),
            )
            self._events.publish(
                FormEvent(
                    self.form_name,
                    FormOutcome.REJECTED,
                    failures=MappingProxyType(result.kinds),
                )
            )
            return result

        self.state.errors = {}
        self.status = FormStatus.SUBMITTED
        self._session.mark_authenticated()
        self._navigator.navigate(self._config.landing)
        logger.info("%s submission accepted", self.form_name)
        self._events.publish(FormEvent(self.form_name, FormOutcome.SUBMITTED))
        return result

    # -- Internals --

    def _ensure_editing(self) -> None:
        if self.status is FormStatus.SUBMITTED:
            msg = f"The {self.form_name} form was already submitted."
            raise FormClosedError(msg)

    def _check_secret(self, field: str) -> None:
        if field not in self.state.secret_visible:
            raise UnknownFieldError(field, self.secret_fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status.value}, errors={sorted(self.state.errors)})"
