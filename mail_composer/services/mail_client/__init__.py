"""Mail client launchers"""

from .base import MailClientAdapter
from .thunderbird_adapter import ThunderbirdAdapter, escape_quotes

__all__ = ["MailClientAdapter", "ThunderbirdAdapter", "escape_quotes"]
