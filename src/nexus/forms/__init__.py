"""Entry forms — sign-in and registration controllers.

Usage::

    from nexus.forms import SignInForm
    from nexus.session import SessionContext

    form = SignInForm(SessionContext(), navigator)
    form.on_field_change("email", "ada@example.com")
    form.on_field_change("password", "analytical")
    result = form.on_submit()
    if not result:
        show(form.errors)
"""

from nexus.forms.controller import FormController
from nexus.forms.events import FormEvent, FormEventBus, FormOutcome, form_events
from nexus.forms.registration import RegistrationForm, graduation_years
from nexus.forms.signin import SignInForm
from nexus.forms.state import FormState, FormStatus

__all__ = [
    "FormController",
    "FormEvent",
    "FormEventBus",
    "FormOutcome",
    "FormState",
    "FormStatus",
    "RegistrationForm",
    "SignInForm",
    "form_events",
    "graduation_years",
]
