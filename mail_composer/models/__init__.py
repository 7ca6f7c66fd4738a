"""Value objects and entities for mail composition"""

from .email_address import EmailAddress
from .mail_draft import MailDraft
from .mail_objects import NOT_RECORDED, MailBody, Subject, WorkTime, WorkTimeRange
from .start_time_map import StartTimeMap

__all__ = [
    "EmailAddress",
    "MailDraft",
    "MailBody",
    "Subject",
    "WorkTime",
    "WorkTimeRange",
    "NOT_RECORDED",
    "StartTimeMap",
]
