"""Static catalogs — alumni, jobs, events, and fundraising campaigns.

Read-only record collections for the browsing screens::

    from nexus.catalog import load_catalog

    catalog = load_catalog()
    for person in catalog.alumni:
        print(person.name, person.company)

    job = catalog.get_job(4)  # RecordNotFound if there is no job 4
"""

from collections.abc import Sequence
from typing import Protocol

from nexus.catalog.models import Alumni, Campaign, Event, EventStatus, Job
from nexus.catalog.records import ALUMNI, CAMPAIGNS, EVENTS, JOBS
from nexus.errors import RecordNotFound

__all__ = [
    "Alumni",
    "Campaign",
    "Catalog",
    "Event",
    "EventStatus",
    "Job",
    "load_catalog",
]


class _Identified(Protocol):
    @property
    def id(self) -> int: ...


def _find[R: _Identified](records: Sequence[R], kind: str, record_id: int) -> R:
    for record in records:
        if record.id == record_id:
            return record
    raise RecordNotFound(kind, record_id)


class Catalog:
    """Four fixed record collections. Never mutated."""

    __slots__ = ("alumni", "campaigns", "events", "jobs")

    def __init__(
        self,
        alumni: Sequence[Alumni] = ALUMNI,
        jobs: Sequence[Job] = JOBS,
        events: Sequence[Event] = EVENTS,
        campaigns: Sequence[Campaign] = CAMPAIGNS,
    ) -> None:
        self.alumni: tuple[Alumni, ...] = tuple(alumni)
        self.jobs: tuple[Job, ...] = tuple(jobs)
        self.events: tuple[Event, ...] = tuple(events)
        self.campaigns: tuple[Campaign, ...] = tuple(campaigns)

    def get_alumni(self, alumni_id: int) -> Alumni:
        return _find(self.alumni, "alumni", alumni_id)

    def get_job(self, job_id: int) -> Job:
        return _find(self.jobs, "job", job_id)

    def get_event(self, event_id: int) -> Event:
        return _find(self.events, "event", event_id)

    def get_campaign(self, campaign_id: int) -> Campaign:
        return _find(self.campaigns, "campaign", campaign_id)

    def open_events(self) -> tuple[Event, ...]:
        """Events still taking registrations."""
        return tuple(event for event in self.events if event.is_open)


_DEFAULT: Catalog | None = None


def load_catalog() -> Catalog:
    """Return the shared catalog of sample records."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Catalog()
    return _DEFAULT
