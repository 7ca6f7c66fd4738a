"""Abstract interface for name-to-address lookup."""

from abc import ABC, abstractmethod
from typing import Iterable

from mail_composer.models.email_address import EmailAddress


class AddressBookPort(ABC):
    """Read-only directory mapping recipient names to email addresses."""

    @abstractmethod
    def resolve(self, name: str) -> EmailAddress:
        """
        Look up the address registered under a name.

        Args:
            name: Exact, case-sensitive name

        Returns:
            EmailAddress for the name

        Raises:
            AppError: NOT_FOUND if the name is unknown,
                UNAVAILABLE_FOR_LEGAL_REASONS if the stored address is invalid
        """
        pass

    def resolve_many(self, names: Iterable[str]) -> list[EmailAddress]:
        """
        Look up several names, keeping their order.

        Stops at the first name that cannot be resolved; no partial result
        is returned.

        Args:
            names: Names in the order the addresses should be returned

        Returns:
            Addresses in input order
        """
        return [self.resolve(name) for name in names]
