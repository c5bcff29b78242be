"""``nexus login`` / ``nexus signup`` — drive the entry forms from flags.

Each flag is fed to the form as a field change, then the form is
submitted once. Rejected forms print their errors and exit 1; accepted
forms land on the alumni directory and print a session token for
``nexus browse``.
"""

import argparse
import logging

from rich.console import Console

from nexus.config import NexusConfig
from nexus.forms import FormController, RegistrationForm, SignInForm, graduation_years
from nexus.session import SessionConfig, SessionContext, SessionSigner
from nexus.views import ConsoleNavigator, render_errors

logger = logging.getLogger("nexus.cli")


def _submit(
    form: FormController,
    args: argparse.Namespace,
    session: SessionContext,
    config: NexusConfig,
    console: Console,
) -> None:
    for field in form.field_names:
        value = getattr(args, field)
        if field in form.choice_fields:
            form.on_selection_change(field, value)
        else:
            form.on_field_change(field, value)

    result = form.on_submit()
    if not result:
        render_errors(console, form.errors)
        raise SystemExit(1)

    console.print(f"[bold green]{form.success_message}[/bold green]")

    if not config.secret_key:
        console.print("[dim]Set NEXUS_SECRET_KEY to receive a session token for nexus browse.[/dim]")
        return

    signer = SessionSigner(SessionConfig(config.secret_key, max_age=config.session_max_age))
    console.print("Session token:", style="bold")
    console.print(signer.dumps(session), soft_wrap=True, highlight=False)


def run_login(args: argparse.Namespace, config: NexusConfig, console: Console) -> None:
    """Sign in with ``--email`` and ``--password``."""
    session = SessionContext()
    form = SignInForm(session, ConsoleNavigator(console, session), config)
    _submit(form, args, session, config, console)


def run_signup(args: argparse.Namespace, config: NexusConfig, console: Console) -> None:
    """Create an account from the signup flags."""
    session = SessionContext()
    form = RegistrationForm(session, ConsoleNavigator(console, session), config)
    if args.graduation_year and args.graduation_year not in form.year_options:
        logger.warning(
            "Graduation year %s is outside the offered range %s-%s",
            args.graduation_year,
            form.year_options[-1],
            form.year_options[0],
        )
    _submit(form, args, session, config, console)


def run_years(config: NexusConfig, console: Console) -> None:
    """Print the graduation years signup offers, newest first."""
    years = graduation_years(config.resolved_year(), config.graduation_year_span)
    console.print(" ".join(years), soft_wrap=True, highlight=False)
