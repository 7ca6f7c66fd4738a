"""Use cases for composing remote-work start and end mails."""

import logging
from datetime import datetime
from typing import Callable, Optional

from mail_composer.config.app_config import AppConfiguration
from mail_composer.config.base import ConfigurationPort, MailConfigPort
from mail_composer.config.mail_templates import (
    REMOTE_WORK_END,
    REMOTE_WORK_START,
    MailTypeConfig,
)
from mail_composer.errors import not_found
from mail_composer.models.mail_objects import WorkTime, WorkTimeRange
from mail_composer.services.address_book.base import AddressBookPort
from mail_composer.services.mail_client.base import MailClientAdapter
from mail_composer.storage.base import WorkTimePort

from .draft_assembler import compose_draft

logger = logging.getLogger(__name__)


class RemoteWorkMailUseCase:
    """Compose the work-start and work-end mails and hand them to the mail client."""

    def __init__(
        self,
        address_book: AddressBookPort,
        configuration: ConfigurationPort,
        mail_client: MailClientAdapter,
        work_time: WorkTimePort,
        mail_config: MailConfigPort,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize use case.

        Args:
            address_book: Recipient name resolution
            configuration: Application configuration source
            mail_client: Mail client launcher
            work_time: Start-time store
            mail_config: Mail template source
            clock: Optional callable returning the current datetime
        """
        self.address_book = address_book
        self.configuration = configuration
        self.mail_client = mail_client
        self.work_time = work_time
        self.mail_config = mail_config
        self.clock = clock

    def send_remote_work_start(self, dry_run: bool = False) -> None:
        """
        Record today's start time and compose the work-start mail.

        The start time is saved before recipients are resolved, so a broken
        address book does not lose the clock-in.

        Args:
            dry_run: Print the Thunderbird command instead of launching it

        Raises:
            AppError: On any configuration, store, lookup or launch failure
        """
        config, start_config = self._load(REMOTE_WORK_START)

        now = WorkTime.now(self.clock)
        self.work_time.save_today_start_time(now)

        draft = compose_draft(start_config, config, self.address_book, now)
        logger.info("Composing work-start mail at %s (dry_run=%s)", now, dry_run)
        self.mail_client.compose_mail(draft, dry_run)

    def send_remote_work_end(self, dry_run: bool = False) -> None:
        """
        Compose the work-end mail with today's worked-hours range.

        When no start time was recorded today the range starts with "--:--".

        Args:
            dry_run: Print the Thunderbird command instead of launching it

        Raises:
            AppError: On any configuration, store, lookup or launch failure
        """
        config, end_config = self._load(REMOTE_WORK_END)

        end_time = WorkTime.now(self.clock)
        start_time = self.work_time.load_today_start_time() or WorkTime.not_recorded()
        if not start_time.is_recorded:
            logger.warning("No start time recorded for today")

        work_range = WorkTimeRange(start_time, end_time)
        draft = compose_draft(
            end_config, config, self.address_book, end_time, work_range.to_string()
        )
        logger.info("Composing work-end mail for %s (dry_run=%s)", work_range, dry_run)
        self.mail_client.compose_mail(draft, dry_run)

    def _load(self, mail_type: str) -> tuple[AppConfiguration, MailTypeConfig]:
        config = self.configuration.load_configuration()
        config.validate_settings()

        mail_type_config = self.mail_config.load_mail_config().get_mail_type(mail_type)
        if mail_type_config is None:
            raise not_found(
                f"mail type not configured: {mail_type}",
                f'Add a "{mail_type}" entry to mail_templates.json.',
            )
        return config, mail_type_config
