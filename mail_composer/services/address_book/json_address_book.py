"""Address book backed by a JSON file."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from mail_composer.errors import internal, invalid_input, not_found
from mail_composer.models.email_address import EmailAddress
from mail_composer.utils.path_utils import PathLike, resolve_path

from .base import AddressBookPort

logger = logging.getLogger(__name__)


class AddressBookEntry(BaseModel):
    """One record of address_book.json."""

    name: str
    address: str


_ENTRIES_ADAPTER = TypeAdapter(list[AddressBookEntry])


class JsonAddressBook(AddressBookPort):
    """
    Address book loaded from a JSON array of {"name", "address"} records.

    Names must be unique. Addresses are stored as raw strings and only
    validated when resolved.
    """

    def __init__(self, entries: list[AddressBookEntry]):
        """
        Initialize address book.

        Args:
            entries: Records in file order

        Raises:
            AppError: UNAVAILABLE_FOR_LEGAL_REASONS on a duplicate name
        """
        seen: set[str] = set()
        for entry in entries:
            if entry.name in seen:
                raise invalid_input(
                    f"duplicate name in address book: {entry.name}",
                    "Names in the address book must be unique.",
                )
            seen.add(entry.name)

        self._entries = list(entries)
        self._addresses = {
            entry.name: entry.address for entry in sorted(entries, key=lambda e: e.name)
        }

    @classmethod
    def load(cls, path: PathLike, base_dir: Optional[Path] = None) -> "JsonAddressBook":
        """
        Load an address book file.

        Args:
            path: Address book path
            base_dir: Workspace base directory relative paths resolve against

        Returns:
            JsonAddressBook instance

        Raises:
            AppError: INTERNAL_SERVER_ERROR if the file cannot be read,
                UNAVAILABLE_FOR_LEGAL_REASONS if it is malformed or has
                duplicate names
        """
        file_path = resolve_path(path, base_dir)
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise internal(
                f"failed to read address book: {file_path}",
                "Check that the address book file exists and is readable.",
                source=e,
            ) from e

        try:
            entries = _ENTRIES_ADAPTER.validate_json(content)
        except ValidationError as e:
            raise invalid_input(
                f"failed to parse address book: {file_path}",
                'Expected format: [{"name": "...", "address": "..."}]',
                source=e,
            ) from e

        logger.info("Loaded %d address book entries from %s", len(entries), file_path)
        return cls(entries)

    def resolve(self, name: str) -> EmailAddress:
        address = self._addresses.get(name)
        if address is None:
            raise not_found(
                f"no email address registered for name: {name}",
                "Check the address book and the names in the mail template.",
            )
        return EmailAddress.parse(address)

    def entries(self) -> list[AddressBookEntry]:
        """Records in file order."""
        return list(self._entries)

    def names(self) -> list[str]:
        """Registered names, sorted."""
        return list(self._addresses)

    def display_contents(self) -> None:
        """Print every record followed by the entry count."""
        print("=== Address Book ===")
        for entry in self._entries:
            print(f"Name: {entry.name}, Address: {entry.address}")
        print(f"Total entries: {len(self._entries)}")

    def __len__(self) -> int:
        return len(self._entries)


class LazyJsonAddressBook(AddressBookPort):
    """
    Address book file that is only read on the first lookup.

    Lets the work-start flow record the start time even when the address
    book is broken.
    """

    def __init__(self, path: PathLike, base_dir: Optional[Path] = None):
        self.path = path
        self.base_dir = base_dir
        self._book: Optional[JsonAddressBook] = None

    def load(self) -> JsonAddressBook:
        if self._book is None:
            self._book = JsonAddressBook.load(self.path, self.base_dir)
        return self._book

    def resolve(self, name: str) -> EmailAddress:
        return self.load().resolve(name)
