"""Mail template models and placeholder substitution."""

from typing import Optional

from pydantic import BaseModel, Field

REMOTE_WORK_START = "remote_work_start"
REMOTE_WORK_END = "remote_work_end"


class MailTypeConfig(BaseModel):
    """
    Recipients and templates for one kind of mail.

    Supported placeholders are {department}, {from} and {time} in the
    subject and {work_time} in the body. Substitution is a plain textual
    replace with no escape mechanism.
    """

    to_names: list[str]
    cc_names: list[str]
    subject_template: str
    body_template: str

    def format_subject(self, department: str, from_: str, time: str) -> str:
        """
        Fill the subject template.

        Placeholders are replaced in the fixed order {department}, {from},
        {time}; every occurrence is replaced and the result is not
        re-scanned.

        Args:
            department: Value for {department}
            from_: Value for {from}
            time: Value for {time}

        Returns:
            Subject text
        """
        return (
            self.subject_template.replace("{department}", department)
            .replace("{from}", from_)
            .replace("{time}", time)
        )

    def format_body(self, work_time: Optional[str] = None) -> str:
        """
        Fill the body template.

        Args:
            work_time: Value for {work_time}; when None the template is
                returned verbatim

        Returns:
            Body text
        """
        if work_time is None:
            return self.body_template
        return self.body_template.replace("{work_time}", work_time)


class MailConfig(BaseModel):
    """All mail types keyed by name (e.g. "remote_work_start")."""

    mail_types: dict[str, MailTypeConfig] = Field(default_factory=dict)

    def get_mail_type(self, mail_type: str) -> Optional[MailTypeConfig]:
        return self.mail_types.get(mail_type)
