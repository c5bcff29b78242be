"""Registration (signup) form."""

from nexus.config import NexusConfig
from nexus.forms.controller import FormController
from nexus.forms.events import FormEventBus
from nexus.navigation import Navigator
from nexus.session import Authenticatable


def graduation_years(current_year: int, span: int = 50) -> tuple[str, ...]:
    """The graduation years offered, newest first: current_year back *span* years."""
    return tuple(str(current_year - offset) for offset in range(span))


class RegistrationForm(FormController):
    """Account creation: credentials plus a short alumni profile.

    ``graduation_year`` is chosen from ``year_options``. Only its presence
    is validated; membership in the offered set is up to the caller.
    """

    form_name = "registration"
    field_names = (
        "name",
        "email",
        "password",
        "confirm_password",
        "graduation_year",
        "degree",
        "company",
    )
    secret_fields = ("password", "confirm_password")
    choice_fields = ("graduation_year",)
    success_message = "Account created successfully! Welcome to NEXUS."

    __slots__ = ("year_options",)

    def __init__(
        self,
        session: Authenticatable,
        navigator: Navigator,
        config: NexusConfig | None = None,
        *,
        events: FormEventBus | None = None,
    ) -> None:
        super().__init__(session, navigator, config, events=events)
        self.year_options = graduation_years(
            self._config.resolved_year(),
            self._config.graduation_year_span,
        )
