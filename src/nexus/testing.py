"""Test doubles for code that embeds the entry forms.

Both doubles can share one ``log`` list so a test can assert the order
of side effects across them::

    log: list[str] = []
    session = RecordingSession(log)
    navigator = RecordingNavigator(log)
    form = SignInForm(session, navigator)
    ...
    assert log == ["mark_authenticated", "navigate:/alumni"]
"""


class RecordingSession:
    """Counts ``mark_authenticated()`` calls."""

    __slots__ = ("calls", "log")

    def __init__(self, log: list[str] | None = None) -> None:
        self.calls = 0
        self.log = log if log is not None else []

    @property
    def is_authenticated(self) -> bool:
        return self.calls > 0

    def mark_authenticated(self) -> None:
        self.calls += 1
        self.log.append("mark_authenticated")


class RecordingNavigator:
    """Records every destination it is asked to navigate to."""

    __slots__ = ("destinations", "log")

    def __init__(self, log: list[str] | None = None) -> None:
        self.destinations: list[str] = []
        self.log = log if log is not None else []

    def navigate(self, destination: str) -> None:
        self.destinations.append(str(destination))
        self.log.append(f"navigate:{destination}")


def assert_navigated_once(navigator: RecordingNavigator, destination: str) -> None:
    """Assert exactly one navigation happened, to *destination*."""
    assert navigator.destinations == [destination], (
        f"Expected a single navigation to {destination!r}, got {navigator.destinations!r}"
    )


def assert_not_navigated(navigator: RecordingNavigator) -> None:
    """Assert no navigation happened."""
    assert not navigator.destinations, (
        f"Expected no navigation, got {navigator.destinations!r}"
    )
