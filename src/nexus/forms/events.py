"""Form outcome events — a synchronous bus the controllers publish to.

Every ``on_submit()`` publishes exactly one ``FormEvent``: ``SUBMITTED``
when the form completed, ``REJECTED`` with the kind of each failing rule
otherwise. Events never carry field values.

Listeners subscribe per outcome (or to all of them) and get back a
callable that removes the subscription::

    from nexus.forms.events import FormOutcome, form_events

    def count_rejections(event):
        metrics[event.form] += 1

    unsubscribe = form_events.subscribe(count_rejections, outcome=FormOutcome.REJECTED)
    ...
    unsubscribe()

A listener that raises is logged and skipped. The form has already
committed its outcome by the time listeners run, so a broken listener
never turns a completed submit into a failed one.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from time import time
from types import MappingProxyType

from nexus.errors import ErrorKind

logger = logging.getLogger("nexus.forms.events")


class FormOutcome(StrEnum):
    SUBMITTED = "submitted"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class FormEvent:
    """The outcome of one submit attempt on one form."""

    form: str
    outcome: FormOutcome
    failures: Mapping[str, ErrorKind] = field(default_factory=lambda: MappingProxyType({}))
    timestamp: float = field(default_factory=time)

    @property
    def name(self) -> str:
        """Dotted name, e.g. ``"signin.rejected"``."""
        return f"{self.form}.{self.outcome}"

    @property
    def failed_fields(self) -> tuple[str, ...]:
        return tuple(self.failures)


type FormEventListener = Callable[[FormEvent], None]


class FormEventBus:
    """Fan-out of ``FormEvent``s to subscribed listeners, in subscription order."""

    __slots__ = ("_listeners", "_lock")

    def __init__(self) -> None:
        self._listeners: tuple[tuple[FormEventListener, FormOutcome | None], ...] = ()
        self._lock = threading.Lock()

    def subscribe(
        self,
        listener: FormEventListener,
        *,
        outcome: FormOutcome | None = None,
    ) -> Callable[[], None]:
        """Deliver events to *listener*, only those with *outcome* if given.

        Returns a callable that removes this subscription. Calling it
        more than once is harmless.
        """
        entry = (listener, outcome)
        with self._lock:
            self._listeners = (*self._listeners, entry)

        def unsubscribe() -> None:
            with self._lock:
                self._listeners = tuple(e for e in self._listeners if e is not entry)

        return unsubscribe

    def publish(self, event: FormEvent) -> None:
        with self._lock:
            listeners = self._listeners
        for listener, outcome in listeners:
            if outcome is not None and outcome is not event.outcome:
                continue
            try:
                listener(event)
            except Exception:
                logger.exception("Form event listener %r failed on %s", listener, event.name)

    def __len__(self) -> int:
        return len(self._listeners)


# Shared bus the controllers publish to unless given their own
form_events = FormEventBus()
