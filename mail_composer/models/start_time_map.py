"""Persistent date to start-time mapping."""

from typing import Optional

from pydantic import Field, RootModel


class StartTimeMap(RootModel[dict[str, str]]):
    """
    Mapping of ISO dates (YYYY-MM-DD) to start times (HH:MM).

    Serialized as a plain JSON object. Writes are last-write-wins.
    """

    root: dict[str, str] = Field(default_factory=dict)

    def set_start_time(self, date_key: str, time: str) -> None:
        self.root[date_key] = time

    def get_start_time(self, date_key: str) -> Optional[str]:
        return self.root.get(date_key)

    def entries(self) -> dict[str, str]:
        """Entries sorted by date."""
        return dict(sorted(self.root.items()))

    def __len__(self) -> int:
        return len(self.root)
