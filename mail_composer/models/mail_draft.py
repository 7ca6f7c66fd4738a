"""Mail draft entity."""

from dataclasses import dataclass, field

from .email_address import EmailAddress
from .mail_objects import MailBody, Subject


@dataclass(frozen=True)
class MailDraft:
    """
    A fully assembled mail that has not been dispatched yet.

    Attributes:
        to: Primary recipients, in template order
        cc: Carbon-copy recipients, in template order
        subject: Mail subject
        body: Mail body
    """

    subject: Subject
    body: MailBody
    to: tuple[EmailAddress, ...] = field(default_factory=tuple)
    cc: tuple[EmailAddress, ...] = field(default_factory=tuple)

    def to_addresses_as_string(self) -> str:
        """Comma-joined primary recipients ("" when there are none)."""
        return ",".join(address.as_str() for address in self.to)

    def cc_addresses_as_string(self) -> str:
        """Comma-joined carbon-copy recipients ("" when there are none)."""
        return ",".join(address.as_str() for address in self.cc)
