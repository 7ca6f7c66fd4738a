"""Value objects for mail subject, body and working times."""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from mail_composer.errors import invalid_input

NOT_RECORDED = "--:--"


@dataclass(frozen=True)
class Subject:
    """Mail subject; must not be blank."""

    value: str

    def __post_init__(self):
        if not self.value.strip():
            raise invalid_input("subject is empty", "Set a non-empty subject.")

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MailBody:
    """Mail body; any string, including the empty one."""

    value: str = ""

    def as_str(self) -> str:
        return self.value

    def to_crlf(self) -> str:
        """
        Render the body with Windows line endings.

        Every "\\n" becomes "\\r\\n", including those already preceded by
        "\\r" (so "\\r\\n" turns into "\\r\\r\\n"). Thunderbird's compose
        argument expects this form.

        Returns:
            Body text with CRLF line endings
        """
        return self.value.replace("\n", "\r\n")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkTime:
    """
    Time of day in HH:MM form.

    Only the shape is checked (five characters, a single ":" at index 2),
    so the sentinel "--:--" is a valid WorkTime meaning "no start recorded".
    """

    value: str

    def __post_init__(self):
        if len(self.value) != 5 or self.value.count(":") != 1 or self.value[2] != ":":
            raise invalid_input(
                f"invalid time format: {self.value}",
                "Specify the time in HH:MM form.",
            )

    @classmethod
    def now(cls, clock: Optional[Callable[[], datetime]] = None) -> "WorkTime":
        """
        Current local wall-clock time.

        Args:
            clock: Optional callable returning the current datetime

        Returns:
            WorkTime formatted as HH:MM
        """
        current = clock() if clock is not None else datetime.now()
        return cls(current.strftime("%H:%M"))

    @classmethod
    def not_recorded(cls) -> "WorkTime":
        """Sentinel used when no start time was saved for the day."""
        return cls(NOT_RECORDED)

    @property
    def is_recorded(self) -> bool:
        return self.value != NOT_RECORDED

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkTimeRange:
    """Worked-hours range from start to end."""

    start: WorkTime
    end: WorkTime

    def to_string(self) -> str:
        """Format as "{start}-{end}", e.g. "09:00-18:00"."""
        return f"{self.start.as_str()}-{self.end.as_str()}"

    def __str__(self) -> str:
        return self.to_string()
