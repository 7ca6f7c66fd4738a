"""Use case for reading the application configuration."""

from mail_composer.config.app_config import AppConfiguration
from mail_composer.config.base import ConfigurationPort


class ConfigurationUseCase:
    """Thin facade over a ConfigurationPort for the CLI."""

    def __init__(self, configuration: ConfigurationPort):
        self.configuration = configuration

    def get_configuration(self) -> AppConfiguration:
        return self.configuration.load_configuration()

    def is_configuration_available(self) -> bool:
        return self.configuration.configuration_exists()
