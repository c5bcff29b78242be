"""Nexus CLI — sign in, sign up, and browse the alumni network.

Entry point registered as ``nexus`` in ``pyproject.toml``::

    [project.scripts]
    nexus = "nexus.cli:main"
"""

import argparse
import logging
import os
import sys

from rich.console import Console

from nexus.config import LOG_LEVELS, NexusConfig
from nexus.errors import ConfigurationError

SCREENS = ("alumni", "jobs", "events", "campaigns")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexus",
        description="NEXUS — the alumni network in your terminal.",
    )
    parser.add_argument(
        "--secret-key",
        default=os.environ.get("NEXUS_SECRET_KEY", ""),
        help="Key that signs session tokens (default: $NEXUS_SECRET_KEY)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("NEXUS_LOG_LEVEL", "warning"),
        type=str.lower,
        choices=LOG_LEVELS,
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- nexus login ------------------------------------------------------
    login_parser = subparsers.add_parser("login", help="Sign in to your alumni network")
    login_parser.add_argument("--email", default="", help="Email address")
    login_parser.add_argument("--password", default="", help="Password")

    # -- nexus signup -----------------------------------------------------
    signup_parser = subparsers.add_parser("signup", help="Create your alumni network account")
    signup_parser.add_argument("--name", default="", help="Full name")
    signup_parser.add_argument("--email", default="", help="Email address")
    signup_parser.add_argument("--password", default="", help="Password")
    signup_parser.add_argument(
        "--confirm-password",
        default="",
        dest="confirm_password",
        help="Password, again",
    )
    signup_parser.add_argument(
        "--graduation-year",
        default="",
        dest="graduation_year",
        help="Graduation year (see: nexus years)",
    )
    signup_parser.add_argument("--degree", default="", help="e.g. Computer Science Engineering")
    signup_parser.add_argument("--company", default="", help="Current company")

    # -- nexus browse -----------------------------------------------------
    browse_parser = subparsers.add_parser("browse", help="Browse a screen (requires sign-in)")
    browse_parser.add_argument("screen", choices=SCREENS, help="Which screen to show")
    browse_parser.add_argument(
        "--session",
        default=os.environ.get("NEXUS_SESSION", ""),
        help="Session token printed by login or signup (default: $NEXUS_SESSION)",
    )

    # -- nexus years ------------------------------------------------------
    subparsers.add_parser("years", help="List the graduation years signup accepts")

    return parser


def main(argv: list[str] | None = None, *, console: Console | None = None) -> None:
    """CLI entry point for the ``nexus`` command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        config = NexusConfig(secret_key=args.secret_key, log_level=args.log_level)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    console = console or Console()

    if args.command == "login":
        from nexus.cli._forms import run_login

        run_login(args, config, console)
    elif args.command == "signup":
        from nexus.cli._forms import run_signup

        run_signup(args, config, console)
    elif args.command == "browse":
        from nexus.cli._browse import run_browse

        run_browse(args, config, console)
    elif args.command == "years":
        from nexus.cli._forms import run_years

        run_years(config, console)
