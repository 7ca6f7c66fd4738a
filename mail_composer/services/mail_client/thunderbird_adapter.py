"""Mozilla Thunderbird mail client adapter."""

import logging
import subprocess

from mail_composer.errors import internal
from mail_composer.models.mail_draft import MailDraft

from .base import MailClientAdapter

logger = logging.getLogger(__name__)


def escape_quotes(value: str) -> str:
    """
    Escape single quotes for the compose argument.

    Currently a no-op: quotes pass through unchanged, so a value containing
    "'" can confuse Thunderbird's parser.
    """
    return value.replace("'", "'")


class ThunderbirdAdapter(MailClientAdapter):
    """Mail client adapter for Mozilla Thunderbird (``-compose``)."""

    def __init__(self, thunderbird_exe: str):
        """
        Initialize Thunderbird adapter.

        Args:
            thunderbird_exe: Path to the Thunderbird executable
        """
        self.thunderbird_exe = thunderbird_exe

    @property
    def client_name(self) -> str:
        """Human-readable client name."""
        return "Mozilla Thunderbird"

    def build_compose_arg(self, draft: MailDraft) -> str:
        """
        Serialize a draft into Thunderbird's -compose argument.

        Args:
            draft: Mail draft

        Returns:
            format=plain,to='...',cc='...',subject='...',body='...'
            with comma-joined recipients and a CRLF body
        """
        to = escape_quotes(draft.to_addresses_as_string())
        cc = escape_quotes(draft.cc_addresses_as_string())
        subject = escape_quotes(draft.subject.as_str())
        body = escape_quotes(draft.body.to_crlf())

        return f"format=plain,to='{to}',cc='{cc}',subject='{subject}',body='{body}'"

    def compose_mail(self, draft: MailDraft, dry_run: bool = False) -> None:
        compose_arg = self.build_compose_arg(draft)

        if dry_run:
            print(f"[DRY-RUN] {self.thunderbird_exe} -compose {compose_arg}")
            return

        logger.info("Launching %s", self.thunderbird_exe)
        try:
            process = subprocess.Popen([self.thunderbird_exe, "-compose", compose_arg])
        except (OSError, ValueError) as e:
            raise internal(
                f"failed to launch Thunderbird: {self.thunderbird_exe}",
                'Check the "thunderbird_exe" path in app.json.',
                source=e,
            ) from e

        try:
            process.wait()
        except (OSError, subprocess.SubprocessError) as e:
            raise internal(
                "failed to wait for the Thunderbird process",
                "Check system resources.",
                source=e,
            ) from e
