"""mail-composer: compose remote-work start/end mails in Thunderbird."""

from .errors import AppError, ErrorKind

__version__ = "0.1.0"

__all__ = ["AppError", "ErrorKind", "__version__"]
