"""NEXUS — sign-in, signup, and browsing for an alumni network.

The entry forms validate locally and simulate success: a valid submit
marks the session authenticated and navigates to the alumni directory.

Basic usage::

    from nexus import SessionContext, SignInForm

    session = SessionContext()
    form = SignInForm(session, navigator)
    form.on_field_change("email", "ada@example.com")
    form.on_field_change("password", "analytical")
    if form.on_submit():
        assert session.is_authenticated

Browsing data::

    from nexus import load_catalog
    for job in load_catalog().jobs:
        ...
"""

__version__ = "0.1.0"
__all__ = [
    "Catalog",
    "ConfigurationError",
    "Destination",
    "ErrorKind",
    "FieldValidationFailure",
    "FormClosedError",
    "Navigator",
    "NexusConfig",
    "NexusError",
    "RecordNotFound",
    "RegistrationForm",
    "SessionContext",
    "SignInForm",
    "UnknownFieldError",
    "ValidationResult",
    "load_catalog",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import nexus`` fast while providing a clean top-level API.
    """
    if name == "NexusConfig":
        from nexus.config import NexusConfig

        return NexusConfig

    if name in ("SignInForm", "RegistrationForm"):
        from nexus import forms as _forms

        return getattr(_forms, name)

    if name in ("ValidationResult", "validate"):
        from nexus import validation as _validation

        return getattr(_validation, name)

    if name == "SessionContext":
        from nexus.session import SessionContext

        return SessionContext

    if name in ("Destination", "Navigator"):
        from nexus import navigation as _nav

        return getattr(_nav, name)

    if name in ("Catalog", "load_catalog"):
        from nexus import catalog as _catalog

        return getattr(_catalog, name)

    if name in (
        "ConfigurationError",
        "ErrorKind",
        "FieldValidationFailure",
        "FormClosedError",
        "NexusError",
        "RecordNotFound",
        "UnknownFieldError",
    ):
        from nexus import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
