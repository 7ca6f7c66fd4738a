"""JSON-backed loaders for the application configuration and mail templates."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from mail_composer.errors import AppError, ErrorKind, internal, invalid_input, unprocessable
from mail_composer.utils.path_utils import PathLike, resolve_path

from .app_config import AppConfiguration
from .base import ConfigurationPort, MailConfigPort
from .mail_templates import MailConfig, MailTypeConfig

logger = logging.getLogger(__name__)

DEFAULT_APP_CONFIG_PATH = Path("config/app.json")
DEFAULT_MAIL_TEMPLATES_PATH = Path("config/mail_templates.json")


class JsonConfigurationLoader(ConfigurationPort):
    """Load and validate app.json."""

    def __init__(
        self,
        config_path: Optional[PathLike] = None,
        base_dir: Optional[Path] = None,
    ):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path (default: config/app.json)
            base_dir: Workspace base directory relative paths resolve against
        """
        self.config_path = resolve_path(config_path or DEFAULT_APP_CONFIG_PATH, base_dir)
        self._config: Optional[AppConfiguration] = None

    def load_configuration(self) -> AppConfiguration:
        """
        Load application configuration from file.

        The Thunderbird path is normalized to forward slashes and the
        required settings are validated.

        Returns:
            AppConfiguration instance

        Raises:
            AppError: INTERNAL_SERVER_ERROR if the file cannot be read,
                UNAVAILABLE_FOR_LEGAL_REASONS if it is malformed or invalid
        """
        if self._config is not None:
            return self._config

        try:
            content = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise internal(
                f"failed to read configuration file: {self.config_path}",
                "Check that app.json exists and is readable.",
                source=e,
            ) from e

        try:
            config = AppConfiguration.model_validate_json(content)
        except ValidationError as e:
            raise invalid_input(
                f"failed to parse configuration file: {self.config_path}",
                "Check the format of app.json.",
                source=e,
            ) from e

        config.validate_settings()
        logger.info("Loaded configuration from %s", self.config_path)
        self._config = config
        return config

    def configuration_exists(self) -> bool:
        return self.config_path.is_file()


class JsonMailConfigLoader(MailConfigPort):
    """Load mail_templates.json."""

    def __init__(
        self,
        templates_path: Optional[PathLike] = None,
        base_dir: Optional[Path] = None,
    ):
        self.templates_path = resolve_path(
            templates_path or DEFAULT_MAIL_TEMPLATES_PATH, base_dir
        )

    def load_mail_config(self) -> MailConfig:
        """
        Load every mail type from the templates file.

        Returns:
            MailConfig keyed by mail type name

        Raises:
            AppError: NOT_FOUND if the file is missing, INTERNAL_SERVER_ERROR
                on other read failures, UNPROCESSABLE_ENTITY if the file or
                one of its entries cannot be parsed
        """
        try:
            content = self.templates_path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise AppError(
                ErrorKind.NOT_FOUND,
                f"mail templates file not found: {self.templates_path}",
                "Check that mail_templates.json exists.",
                source=e,
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise internal(
                f"failed to read mail templates file: {self.templates_path}",
                "Check the access permissions of mail_templates.json.",
                source=e,
            ) from e

        try:
            raw_config = json.loads(content)
        except json.JSONDecodeError as e:
            raise unprocessable(
                f"failed to parse mail templates file: {self.templates_path}",
                "Check the format of mail_templates.json.",
                source=e,
            ) from e

        if not isinstance(raw_config, dict):
            raise unprocessable(
                f"mail templates file must contain a JSON object: {self.templates_path}",
                "Use mail type names as the top-level keys.",
            )

        mail_types = {}
        for key, value in raw_config.items():
            try:
                mail_types[key] = MailTypeConfig.model_validate(value)
            except ValidationError as e:
                raise unprocessable(
                    f"failed to parse mail type '{key}'",
                    "Check the entry has to_names, cc_names, subject_template and body_template.",
                    source=e,
                ) from e

        logger.info("Loaded %d mail types from %s", len(mail_types), self.templates_path)
        return MailConfig(mail_types=mail_types)
