"""Mail composition use cases"""

from .configuration import ConfigurationUseCase
from .draft_assembler import assemble_draft, compose_draft
from .remote_work_mail import RemoteWorkMailUseCase

__all__ = [
    "ConfigurationUseCase",
    "RemoteWorkMailUseCase",
    "assemble_draft",
    "compose_draft",
]
