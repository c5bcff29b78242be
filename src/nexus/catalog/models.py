"""Catalog record types.

Frozen dataclasses with tuple-valued list fields: the catalogs are
read-only, so are their records.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class Alumni:
    id: int
    name: str
    title: str
    company: str
    location: str
    graduation_year: int
    degree: str
    department: str
    email: str
    profile_image: str
    skills: tuple[str, ...]
    match: int  # Percent
    achievements: str
    linkedin: str | None = None
    twitter: str | None = None
    github: str | None = None

    @property
    def links(self) -> dict[str, str]:
        """The social profiles this alumnus listed."""
        candidates = {"linkedin": self.linkedin, "twitter": self.twitter, "github": self.github}
        return {site: url for site, url in candidates.items() if url}


@dataclass(frozen=True, slots=True)
class Job:
    id: int
    title: str
    company: str
    location: str
    salary: str
    type: str
    description: str
    requirements: tuple[str, ...]
    posted_date: str
    applicants: int


type EventStatus = Literal["Open", "Closed"]


@dataclass(frozen=True, slots=True)
class Event:
    id: int
    name: str
    date: str
    time: str
    location: str
    fee: str
    description: str
    speakers: tuple[str, ...]
    attendees: int
    registration_deadline: str
    status: EventStatus

    @property
    def is_open(self) -> bool:
        return self.status == "Open"


@dataclass(frozen=True, slots=True)
class Campaign:
    """A fundraising campaign. ``raised`` and ``goal`` are in rupees."""

    id: int
    name: str
    description: str
    category: str
    supporters: int
    raised: int
    goal: int
    progress: int  # Percent, as published
    end_date: str
