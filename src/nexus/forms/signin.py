"""Sign-in form."""

from nexus.forms.controller import FormController


class SignInForm(FormController):
    """Email and password.

    Success means both fields passed the local shape checks; no identity
    verifier is contacted.
    """

    form_name = "signin"
    field_names = ("email", "password")
    secret_fields = ("password",)
    success_message = "Login successful!"

    __slots__ = ()
