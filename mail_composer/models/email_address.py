"""Email address value object."""

from dataclasses import dataclass

from mail_composer.errors import invalid_input


@dataclass(frozen=True)
class EmailAddress:
    """
    A validated email address.

    Only the presence of "@" is checked; no further RFC 5322 validation
    is performed.

    Attributes:
        value: Raw address string
    """

    value: str

    def __post_init__(self):
        """Validate the address after initialization."""
        if "@" not in self.value:
            raise invalid_input(
                f"invalid email address format: {self.value}",
                "Specify a valid email address.",
            )

    @classmethod
    def parse(cls, email_address: str) -> "EmailAddress":
        """
        Parse a string into an EmailAddress.

        Args:
            email_address: Raw address string

        Returns:
            EmailAddress instance

        Raises:
            AppError: UNAVAILABLE_FOR_LEGAL_REASONS if the string has no "@"

        Examples:
            >>> EmailAddress.parse("sample@example.com").as_str()
            'sample@example.com'
        """
        return cls(email_address)

    def as_str(self) -> str:
        """Return the raw address string."""
        return self.value

    def __str__(self) -> str:
        return self.value
