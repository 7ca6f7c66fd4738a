"""Recipient name resolution"""

from .base import AddressBookPort
from .json_address_book import AddressBookEntry, JsonAddressBook, LazyJsonAddressBook

__all__ = ["AddressBookPort", "AddressBookEntry", "JsonAddressBook", "LazyJsonAddressBook"]
