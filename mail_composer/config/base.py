"""Abstract interfaces for reading configuration."""

from abc import ABC, abstractmethod

from .app_config import AppConfiguration
from .mail_templates import MailConfig


class ConfigurationPort(ABC):
    """Source of the application configuration."""

    @abstractmethod
    def load_configuration(self) -> AppConfiguration:
        """
        Load and validate the application configuration.

        Returns:
            AppConfiguration instance

        Raises:
            AppError: If the configuration cannot be read, parsed or validated
        """
        pass

    @abstractmethod
    def configuration_exists(self) -> bool:
        """
        Check whether the configuration source is available.

        Returns:
            True if the configuration file exists, False otherwise
        """
        pass


class MailConfigPort(ABC):
    """Source of the mail templates."""

    @abstractmethod
    def load_mail_config(self) -> MailConfig:
        """
        Load all mail types.

        Returns:
            MailConfig instance

        Raises:
            AppError: If the templates cannot be read or parsed
        """
        pass
