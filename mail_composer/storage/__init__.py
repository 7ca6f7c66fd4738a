"""Data persistence layer"""

from .base import WorkTimePort
from .work_time_store import JsonWorkTimeStore

__all__ = ["WorkTimePort", "JsonWorkTimeStore"]
