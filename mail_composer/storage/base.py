"""Abstract interface for the per-day start-time store."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Optional

from mail_composer.models.mail_objects import WorkTime


class WorkTimePort(ABC):
    """
    Read/write access to the recorded start time of each day.

    The "today" helpers use the local calendar date supplied by
    ``today`` (``date.today`` unless overridden).
    """

    today: Callable[[], date] = staticmethod(date.today)

    @abstractmethod
    def save_start_time(self, day: date, start_time: WorkTime) -> None:
        """
        Record the start time of a day, replacing any earlier value.

        Args:
            day: Calendar date
            start_time: Start time

        Raises:
            AppError: If the store cannot be read or written
        """
        pass

    @abstractmethod
    def load_start_time(self, day: date) -> Optional[WorkTime]:
        """
        Read the start time of a day.

        Args:
            day: Calendar date

        Returns:
            WorkTime, or None if nothing was recorded for the day

        Raises:
            AppError: If the store cannot be read or parsed
        """
        pass

    def save_today_start_time(self, start_time: WorkTime) -> None:
        self.save_start_time(self.today(), start_time)

    def load_today_start_time(self) -> Optional[WorkTime]:
        return self.load_start_time(self.today())
