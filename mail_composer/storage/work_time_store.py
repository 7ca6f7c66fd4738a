"""Start-time store backed by a JSON file."""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError

from mail_composer.errors import internal, invalid_input
from mail_composer.models.mail_objects import WorkTime
from mail_composer.models.start_time_map import StartTimeMap
from mail_composer.utils.path_utils import PathLike, ensure_directory_exists, resolve_path

from .base import WorkTimePort

logger = logging.getLogger(__name__)

DEFAULT_LOG_DIR = "data"
DEFAULT_FILE_NAME = "work_times.json"


class JsonWorkTimeStore(WorkTimePort):
    """
    Start times persisted as {"YYYY-MM-DD": "HH:MM"} in one JSON file.

    The file is read fresh on every call and rewritten in full on every
    save. There is no locking: one process at a time per file.
    """

    def __init__(
        self,
        base_dir: Optional[Path] = None,
        log_dir: PathLike = DEFAULT_LOG_DIR,
        file_name: str = DEFAULT_FILE_NAME,
        today: Optional[Callable[[], date]] = None,
    ):
        """
        Initialize start-time store.

        Args:
            base_dir: Workspace base directory relative paths resolve against
            log_dir: Directory holding the store file (default: data)
            file_name: Store file name (default: work_times.json)
            today: Optional callable returning the local date
        """
        self.file_path = resolve_path(log_dir, base_dir) / file_name
        if today is not None:
            self.today = today

    def load_start_time_map(self) -> StartTimeMap:
        """
        Read the whole store.

        Returns:
            StartTimeMap; empty if the file does not exist yet

        Raises:
            AppError: INTERNAL_SERVER_ERROR if the file cannot be read,
                UNAVAILABLE_FOR_LEGAL_REASONS if it cannot be parsed
        """
        if not self.file_path.exists():
            return StartTimeMap()

        try:
            content = self.file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise internal(
                f"failed to read start-time file: {self.file_path}",
                "Check that the file exists and is readable.",
                source=e,
            ) from e

        try:
            return StartTimeMap.model_validate_json(content)
        except ValidationError as e:
            raise invalid_input(
                f"failed to parse start-time file: {self.file_path}",
                'Expected format: {"YYYY-MM-DD": "HH:MM"}',
                source=e,
            ) from e

    def save_start_time_map(self, start_times: StartTimeMap) -> None:
        """
        Overwrite the store with a full map.

        Args:
            start_times: Map to persist

        Raises:
            AppError: INTERNAL_SERVER_ERROR if the directory or file cannot
                be written
        """
        ensure_directory_exists(self.file_path.parent)

        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(start_times.entries(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise internal(
                f"failed to write start-time file: {self.file_path}",
                "Check disk space and write permissions.",
                source=e,
            ) from e

    def save_start_time(self, day: date, start_time: WorkTime) -> None:
        start_times = self.load_start_time_map()
        start_times.set_start_time(day.isoformat(), start_time.as_str())
        self.save_start_time_map(start_times)
        logger.info("Saved start time %s for %s", start_time, day.isoformat())

    def load_start_time(self, day: date) -> Optional[WorkTime]:
        time_str = self.load_start_time_map().get_start_time(day.isoformat())
        if time_str is None:
            return None
        return WorkTime(time_str)
