"""Application configuration.

NexusConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from datetime import date

from nexus.errors import ConfigurationError
from nexus.navigation import Destination

LOG_LEVELS = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class NexusConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = NexusConfig(secret_key="s3cr3t", log_level="debug")
    """

    # Validation
    min_password_length: int = 6

    # Registration
    graduation_year_span: int = 50  # Years offered, counting back from current_year
    current_year: int | None = None  # None = today's calendar year

    # Navigation
    landing: str = "/alumni"  # Where a successful sign-in or signup goes; a Destination path

    # Session tokens
    secret_key: str = ""
    session_max_age: int = 86400  # 24 hours

    # Logging
    log_level: str = "warning"  # One of LOG_LEVELS, any case

    def __post_init__(self) -> None:
        if self.min_password_length < 1:
            msg = f"min_password_length must be positive, got {self.min_password_length}"
            raise ConfigurationError(msg)
        if self.graduation_year_span < 1:
            msg = f"graduation_year_span must be positive, got {self.graduation_year_span}"
            raise ConfigurationError(msg)
        if self.session_max_age < 1:
            msg = f"session_max_age must be positive, got {self.session_max_age}"
            raise ConfigurationError(msg)
        if self.landing not in {d.value for d in Destination}:
            known = ", ".join(d.value for d in Destination)
            msg = f"landing must be one of {known}, got {self.landing!r}"
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)

    @property
    def logging_level(self) -> str:
        """``log_level`` as the name the logging module expects, e.g. ``"WARNING"``."""
        return self.log_level.upper()

    def resolved_year(self) -> int:
        """The year the graduation year options count back from."""
        if self.current_year is not None:
            return self.current_year
        return date.today().year
