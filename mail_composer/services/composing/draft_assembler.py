"""Assemble mail drafts from templates and resolved recipients."""

from typing import Iterable, Optional

from mail_composer.config.app_config import AppConfiguration
from mail_composer.config.mail_templates import MailTypeConfig
from mail_composer.models.email_address import EmailAddress
from mail_composer.models.mail_draft import MailDraft
from mail_composer.models.mail_objects import MailBody, Subject, WorkTime
from mail_composer.services.address_book.base import AddressBookPort


def assemble_draft(
    to: Iterable[EmailAddress],
    cc: Iterable[EmailAddress],
    subject: Subject,
    body: MailBody,
) -> MailDraft:
    """Build a MailDraft, keeping recipient order."""
    return MailDraft(subject=subject, body=body, to=tuple(to), cc=tuple(cc))


def compose_draft(
    mail_type: MailTypeConfig,
    config: AppConfiguration,
    address_book: AddressBookPort,
    time: WorkTime,
    work_time: Optional[str] = None,
) -> MailDraft:
    """
    Resolve recipients and fill the templates of one mail type.

    Args:
        mail_type: Recipients and templates
        config: Supplies the department and sender name
        address_book: Resolves to_names and cc_names (in that order)
        time: Value for {time} in the subject
        work_time: Value for {work_time} in the body; None keeps the body
            template verbatim

    Returns:
        MailDraft

    Raises:
        AppError: If a recipient cannot be resolved or the subject is blank
    """
    to = address_book.resolve_many(mail_type.to_names)
    cc = address_book.resolve_many(mail_type.cc_names)

    subject = Subject(mail_type.format_subject(config.department, config.from_, time.as_str()))
    body = MailBody(mail_type.format_body(work_time))

    return assemble_draft(to, cc, subject, body)
