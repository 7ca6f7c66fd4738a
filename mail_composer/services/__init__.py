"""Business logic services"""

from .address_book import AddressBookPort, JsonAddressBook
from .composing import ConfigurationUseCase, RemoteWorkMailUseCase, assemble_draft
from .mail_client import MailClientAdapter, ThunderbirdAdapter

__all__ = [
    "AddressBookPort",
    "JsonAddressBook",
    "ConfigurationUseCase",
    "RemoteWorkMailUseCase",
    "assemble_draft",
    "MailClientAdapter",
    "ThunderbirdAdapter",
]
