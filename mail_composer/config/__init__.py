"""Configuration management"""

from .app_config import AppConfiguration
from .base import ConfigurationPort, MailConfigPort
from .config_loader import JsonConfigurationLoader, JsonMailConfigLoader
from .mail_templates import REMOTE_WORK_END, REMOTE_WORK_START, MailConfig, MailTypeConfig

__all__ = [
    "AppConfiguration",
    "ConfigurationPort",
    "MailConfigPort",
    "JsonConfigurationLoader",
    "JsonMailConfigLoader",
    "MailConfig",
    "MailTypeConfig",
    "REMOTE_WORK_START",
    "REMOTE_WORK_END",
]
