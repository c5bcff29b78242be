"""Terminal screens.

Renders the browsing screens and form errors with ``rich``, and provides
``ConsoleNavigator``, the navigator the CLI hands to the entry forms.
"""

import logging
from collections.abc import Callable, Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from nexus.catalog import Alumni, Campaign, Catalog, Event, Job, load_catalog
from nexus.navigation import Destination
from nexus.session import SessionContext

logger = logging.getLogger("nexus.views")

# Labels the entry forms show next to each field
FIELD_LABELS: dict[str, str] = {
    "name": "Full Name",
    "email": "Email Address",
    "password": "Password",
    "confirm_password": "Confirm Password",
    "graduation_year": "Graduation Year",
    "degree": "Degree",
    "company": "Current Company",
}


# ---------------------------------------------------------------------------
# Forms
# ---------------------------------------------------------------------------


def render_errors(console: Console, errors: Mapping[str, str]) -> None:
    """Show each failing field with its message."""
    table = Table(title="Please fix the following", show_header=False, title_style="bold red")
    table.add_column("Field", style="bold")
    table.add_column("Message", style="red")
    for field, message in errors.items():
        table.add_row(FIELD_LABELS.get(field, field), message)
    console.print(table)


def render_sign_in_prompt(console: Console) -> None:
    console.print(
        Panel(
            "Sign in to your alumni network to continue.\n"
            "[dim]Don't have an account? Use [bold]nexus signup[/bold].[/dim]",
            title="Welcome back to NEXUS",
            border_style="magenta",
        )
    )


def render_sign_up_prompt(console: Console) -> None:
    console.print(
        Panel(
            "Create your alumni network account.\n"
            "[dim]Already have an account? Use [bold]nexus login[/bold].[/dim]",
            title="Join the NEXUS Community",
            border_style="magenta",
        )
    )


# ---------------------------------------------------------------------------
# Browsing screens
# ---------------------------------------------------------------------------


def render_alumni(console: Console, alumni: Iterable[Alumni]) -> None:
    table = Table(title="Alumni Directory", show_header=True, header_style="bold cyan")
    table.add_column("Name")
    table.add_column("Title")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("Class", justify="right")
    table.add_column("Skills")
    table.add_column("Match", justify="right")

    for person in alumni:
        table.add_row(
            person.name,
            person.title,
            person.company,
            person.location,
            str(person.graduation_year),
            ", ".join(person.skills),
            f"{person.match}%",
        )

    console.print(table)


def render_jobs(console: Console, jobs: Iterable[Job]) -> None:
    table = Table(title="Job Board", show_header=True, header_style="bold cyan")
    table.add_column("Title")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("Salary")
    table.add_column("Type")
    table.add_column("Requirements")
    table.add_column("Posted")
    table.add_column("Applicants", justify="right")

    for job in jobs:
        table.add_row(
            job.title,
            job.company,
            job.location,
            job.salary,
            job.type,
            ", ".join(job.requirements),
            job.posted_date,
            str(job.applicants),
        )

    console.print(table)


def render_events(console: Console, events: Iterable[Event]) -> None:
    table = Table(title="Upcoming Events", show_header=True, header_style="bold cyan")
    table.add_column("Event")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Location")
    table.add_column("Fee")
    table.add_column("Attendees", justify="right")
    table.add_column("Register By")
    table.add_column("Status")

    for event in events:
        status = "[green]Open[/green]" if event.is_open else "[red]Closed[/red]"
        table.add_row(
            event.name,
            event.date,
            event.time,
            event.location,
            event.fee,
            str(event.attendees),
            event.registration_deadline,
            status,
        )

    console.print(table)


def render_campaigns(console: Console, campaigns: Iterable[Campaign]) -> None:
    table = Table(title="Fundraising Campaigns", show_header=True, header_style="bold cyan")
    table.add_column("Campaign")
    table.add_column("Category")
    table.add_column("Raised", justify="right")
    table.add_column("Goal", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Supporters", justify="right")
    table.add_column("Ends")

    for campaign in campaigns:
        table.add_row(
            campaign.name,
            campaign.category,
            f"₹{campaign.raised:,}",
            f"₹{campaign.goal:,}",
            f"{campaign.progress}%",
            str(campaign.supporters),
            campaign.end_date,
        )

    console.print(table)


def render_screen(console: Console, destination: Destination, catalog: Catalog) -> None:
    """Render the screen a destination names."""
    screens: dict[Destination, Callable[[], None]] = {
        Destination.LOGIN: lambda: render_sign_in_prompt(console),
        Destination.SIGNUP: lambda: render_sign_up_prompt(console),
        Destination.ALUMNI: lambda: render_alumni(console, catalog.alumni),
        Destination.JOBS: lambda: render_jobs(console, catalog.jobs),
        Destination.EVENTS: lambda: render_events(console, catalog.events),
        Destination.CAMPAIGNS: lambda: render_campaigns(console, catalog.campaigns),
    }
    screens[destination]()


# ---------------------------------------------------------------------------
# Navigator
# ---------------------------------------------------------------------------


class ConsoleNavigator:
    """Navigates by rendering the destination screen to a console.

    Protected screens render only for an authenticated session; anyone
    else is sent to the sign-in screen instead. Every destination actually
    shown is appended to ``history``.
    """

    __slots__ = ("_catalog", "_console", "_session", "history")

    def __init__(
        self,
        console: Console,
        session: SessionContext,
        catalog: Catalog | None = None,
    ) -> None:
        self._console = console
        self._session = session
        self._catalog = catalog or load_catalog()
        self.history: list[Destination] = []

    def navigate(self, destination: str) -> None:
        target = Destination(destination)
        if target.is_protected and not self._session.is_authenticated:
            logger.debug("Redirecting unauthenticated visit to %s", target)
            target = Destination.LOGIN
        self.history.append(target)
        render_screen(self._console, target, self._catalog)
