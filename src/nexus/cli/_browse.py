"""``nexus browse`` — render a browsing screen for a signed-in session."""

import argparse
import sys

from rich.console import Console

from nexus.config import NexusConfig
from nexus.errors import ConfigurationError
from nexus.navigation import Destination
from nexus.session import SessionConfig, SessionSigner
from nexus.views import ConsoleNavigator


def run_browse(args: argparse.Namespace, config: NexusConfig, console: Console) -> None:
    """Verify ``--session`` and show the requested screen.

    Exits 2 when the token is missing, forged, or expired; the sign-in
    screen is shown instead.
    """
    try:
        signer = SessionSigner(SessionConfig(config.secret_key, max_age=config.session_max_age))
    except ConfigurationError as exc:
        print(f"Error: {exc} Pass --secret-key or set NEXUS_SECRET_KEY.", file=sys.stderr)
        raise SystemExit(2) from exc

    session = signer.loads(args.session)
    navigator = ConsoleNavigator(console, session)
    navigator.navigate(Destination(f"/{args.screen}"))

    if navigator.history[-1] is Destination.LOGIN:
        raise SystemExit(2)
