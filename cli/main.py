"""Main CLI entry point for mail-composer."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mail_composer.config.config_loader import JsonConfigurationLoader, JsonMailConfigLoader
from mail_composer.errors import AppError
from mail_composer.services.address_book.json_address_book import (
    JsonAddressBook,
    LazyJsonAddressBook,
)
from mail_composer.services.composing.configuration import ConfigurationUseCase
from mail_composer.services.composing.remote_work_mail import RemoteWorkMailUseCase
from mail_composer.services.mail_client.thunderbird_adapter import ThunderbirdAdapter
from mail_composer.storage.work_time_store import JsonWorkTimeStore

logger = logging.getLogger(__name__)


def build_use_case(args) -> RemoteWorkMailUseCase:
    """
    Wire the JSON/file-backed adapters into the remote-work use case.

    Args:
        args: Parsed command-line arguments

    Returns:
        RemoteWorkMailUseCase instance
    """
    configuration = JsonConfigurationLoader(args.config, args.base_dir)
    config = configuration.load_configuration()

    return RemoteWorkMailUseCase(
        address_book=LazyJsonAddressBook(config.address_book_path(), args.base_dir),
        configuration=configuration,
        mail_client=ThunderbirdAdapter(config.thunderbird_exe),
        work_time=JsonWorkTimeStore(args.base_dir, config.log_dir, config.start_time_file),
        mail_config=JsonMailConfigLoader(args.templates, args.base_dir),
    )


def cmd_start(args):
    """Work-start command."""
    build_use_case(args).send_remote_work_start(args.dry_run)


def cmd_end(args):
    """Work-end command."""
    build_use_case(args).send_remote_work_end(args.dry_run)


def cmd_show_config(args):
    """Show configuration command."""
    use_case = ConfigurationUseCase(JsonConfigurationLoader(args.config, args.base_dir))
    if not use_case.is_configuration_available():
        logger.warning("Configuration file not found")

    config = use_case.get_configuration()
    print(f"From: {config.from_}")
    print(f"Department: {config.department}")
    print(f"Thunderbird: {config.thunderbird_exe}")
    print(f"Address book: {config.address_book_path()}")
    print(f"Start time file: {config.start_time_file_path()}")
    print(f"Output dir: {config.output_dir_path()}")
    print(f"Log dir: {config.log_dir_path()}")


def cmd_list_addresses(args):
    """List address book command."""
    config = JsonConfigurationLoader(args.config, args.base_dir).load_configuration()
    JsonAddressBook.load(config.address_book_path(), args.base_dir).display_contents()


COMMANDS = {
    "start": cmd_start,
    "end": cmd_end,
    "show-config": cmd_show_config,
    "list-addresses": cmd_list_addresses,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="mail-composer - Remote work start/end mails for Thunderbird"
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Workspace directory relative paths resolve against (default: current directory)",
    )
    parser.add_argument("--config", type=Path, help="Custom app.json path")
    parser.add_argument("--templates", type=Path, help="Custom mail_templates.json path")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    start_parser = subparsers.add_parser("start", help="Compose the work-start mail")
    start_parser.add_argument(
        "--dry-run", action="store_true", help="Print the Thunderbird command only"
    )

    end_parser = subparsers.add_parser("end", help="Compose the work-end mail")
    end_parser.add_argument(
        "--dry-run", action="store_true", help="Print the Thunderbird command only"
    )

    subparsers.add_parser("show-config", help="Show the loaded configuration")
    subparsers.add_parser("list-addresses", help="List address book entries")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        COMMANDS[args.command](args)
    except AppError as e:
        print(f"Error: {e.kind.as_str()}: {e.message}", file=sys.stderr)
        if e.action:
            print(f"Hint: {e.action}", file=sys.stderr)
        logger.debug("Error details", exc_info=e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
