"""Abstract interface for handing drafts to a mail client."""

from abc import ABC, abstractmethod

from mail_composer.models.mail_draft import MailDraft


class MailClientAdapter(ABC):
    """
    Abstract interface for mail client integrations.

    An adapter opens a compose window pre-filled with a draft. Sending is
    left to the user.
    """

    @abstractmethod
    def compose_mail(self, draft: MailDraft, dry_run: bool = False) -> None:
        """
        Open the mail client's compose window for a draft.

        Args:
            draft: Assembled mail draft
            dry_run: Print the command instead of launching the client

        Raises:
            AppError: INTERNAL_SERVER_ERROR if the client cannot be launched

        Notes:
            - No retries; a failed launch propagates to the caller
        """
        pass

    @property
    @abstractmethod
    def client_name(self) -> str:
        """
        Human-readable name of the mail client.

        Returns:
            Client name (e.g., "Mozilla Thunderbird")
        """
        pass
