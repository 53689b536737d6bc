"""Domain models for exercise logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta

DATE_FORMAT = "%a %b %d %Y"


@dataclass(frozen=True)
class ExerciseRecord:
    """An exercise stored in the database."""

    id: str
    user_id: str
    description: str
    duration: int
    date: datetime


@dataclass(frozen=True)
class DateBounds:
    """Optional inclusive calendar-day bounds for a log query."""

    start: date | None = None
    end: date | None = None

    @property
    def lower(self) -> datetime | None:
        """First instant included by the bounds, if any."""
        if self.start is None:
            return None
        return start_of_day(self.start)

    @property
    def upper(self) -> datetime | None:
        """First instant past the bounds, if any."""
        if self.end is None:
            return None
        return start_of_day(self.end) + timedelta(days=1)

    def contains(self, moment: datetime) -> bool:
        """Return true when the moment falls inside the bounds."""
        lower = self.lower
        upper = self.upper
        if lower is not None and moment < lower:
            return False
        return upper is None or moment < upper


@dataclass(frozen=True)
class LogEntry:
    """Public view of a single logged exercise."""

    description: str
    duration: int
    date: str


@dataclass(frozen=True)
class LoggedExercise:
    """Result of adding an exercise for a user."""

    id: str
    username: str
    description: str
    duration: int
    date: str


@dataclass(frozen=True)
class ExerciseLog:
    """A user's filtered exercise log."""

    id: str
    username: str
    log: list[LogEntry]

    @property
    def count(self) -> int:
        return len(self.log)


def start_of_day(day: date) -> datetime:
    """Return midnight UTC for a calendar day."""
    return datetime.combine(day, time.min, tzinfo=UTC)


def format_exercise_date(value: datetime) -> str:
    """Format a stored exercise date like ``Mon Jan 01 2024``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(DATE_FORMAT)
