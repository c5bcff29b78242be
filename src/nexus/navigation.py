"""Navigation — the views of the application and the seam that moves between them."""

from enum import StrEnum
from typing import Protocol, runtime_checkable


class Destination(StrEnum):
    """Every view the application can navigate to."""

    LOGIN = "/login"
    SIGNUP = "/signup"
    ALUMNI = "/alumni"
    JOBS = "/jobs"
    EVENTS = "/events"
    CAMPAIGNS = "/campaigns"

    @property
    def is_protected(self) -> bool:
        """True for views that need an authenticated session."""
        return self not in _PUBLIC


_PUBLIC = frozenset({Destination.LOGIN, Destination.SIGNUP})


@runtime_checkable
class Navigator(Protocol):
    """Performs a one-way transition to another view."""

    def navigate(self, destination: str) -> None: ...
