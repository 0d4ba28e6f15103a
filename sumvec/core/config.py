from dataclasses import dataclass, field
from enum import Enum
import logging


# Fixed iteration policy: start inclusive, stop exclusive.
RANGE_START = 1
RANGE_STOP = 5

RESULT_LABEL = "sum is"


class VerbosityLevel(Enum):
    """Verbosity levels for diagnostics written to stderr."""
    QUIET = "quiet"
    NORMAL = "normal"
    DETAILED = "detailed"
    EXPERT = "expert"


@dataclass
class LoggingConfig:
    """Configuration for diagnostic logging."""
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    date_format: str = "%H:%M:%S"

    # Verbosity to logging level
    levels: dict = field(default_factory=lambda: {
        VerbosityLevel.QUIET: logging.ERROR,
        VerbosityLevel.NORMAL: logging.WARNING,
        VerbosityLevel.DETAILED: logging.INFO,
        VerbosityLevel.EXPERT: logging.DEBUG,
    })

    def level_for(self, verbosity: VerbosityLevel) -> int:
        return self.levels.get(verbosity, logging.WARNING)


@dataclass
class Config:
    """Main configuration class that combines all settings."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    verbosity: VerbosityLevel = VerbosityLevel.NORMAL

    range_start: int = RANGE_START
    range_stop: int = RANGE_STOP

    def __post_init__(self):
        self._validate_settings()

    def _validate_settings(self):
        if self.range_stop <= self.range_start:
            raise ValueError(
                f"Empty range: stop ({self.range_stop}) must be greater than start ({self.range_start})"
            )

    @property
    def log_level(self) -> int:
        return self.logging.level_for(self.verbosity)


def create_default_config() -> Config:
    """Create a default configuration instance."""
    return Config()
