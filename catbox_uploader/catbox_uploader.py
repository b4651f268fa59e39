#!/usr/bin/env python3
"""
Catbox Uploader - Command Line Interface

Uploads a file permanently to Catbox or temporarily to Litterbox and prints the URL.
"""

import sys
import argparse
from typing import List, Optional

from . import __version__
from .catbox_client import CatboxClient
from .credential_store import CredentialStore
from .errors import CatboxError, ConflictingOptions, MissingFilePath, UsageError
from .logging_utils import setup_logging, get_logger
from .config import config
from .commands import handle_upload_command, handle_save_userhash_command
from .upload_request import VALID_TIMES
from .utils import print_info

# Get logger for this module
logger = get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(f"{self.prog}: error: {message}")


def _create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    valid_times = '", "'.join(VALID_TIMES)
    parser = _ArgumentParser(
        prog="catbox-uploader",
        usage="%(prog)s ./path/to/file [OPTION]",
        description="Uploads the file permanently to Catbox and returns the URL. (200MB file size limit)",
        epilog="Only one of --help, --userhash, --anon and --time can be used at a time.",
        add_help=False,
    )

    parser.add_argument("file", nargs="?", help="Path to the file you want to upload")
    parser.add_argument(
        "-h", "--help", action="store_true", help="Shows this message."
    )
    parser.add_argument(
        "--userhash",
        metavar="HASH",
        help="Uses a specific userhash for Catbox. Without a file, saves it as the default.",
    )
    parser.add_argument(
        "--anon",
        action="store_true",
        help="Uploads to Catbox anonymously, ignoring the default userhash.",
    )
    parser.add_argument(
        "--time",
        metavar="TIME",
        help=f'Uploads the file temporarily to Litterbox, valid time options are "{valid_times}". (1GB file size limit)',
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show verbose output"
    )
    parser.add_argument(
        "--version", action="store_true", help="Show the version and exit"
    )

    return parser


def _check_exclusive_options(args) -> None:
    """
    Reject more than one of --help, --userhash, --anon and --time.

    Runs before any filesystem access.
    """
    selected = [args.help, args.userhash is not None, args.anon, args.time is not None]
    if sum(1 for option in selected if option) > 1:
        raise ConflictingOptions()


def _initialize_application(args) -> tuple[CredentialStore, CatboxClient]:
    """
    Initialize the application components.

    Args:
        args: Parsed command line arguments

    Returns:
        Tuple of (credential_store, client)
    """
    setup_logging(
        log_folder=config.get("log_folder"),
        log_basename=config.get("log_basename"),
        max_bytes=config.get("max_log_size_mb", 5) * 1024 * 1024,
        backup_count=config.get("max_log_backups", 10),
        verbose=args.verbose,
    )

    store = CredentialStore(config.get("userhash_file"))
    client = CatboxClient()

    return store, client


def run(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run the requested command and map errors to an exit code.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = _create_argument_parser()

    try:
        args = parser.parse_args(argv)
        _check_exclusive_options(args)

        if args.help:
            parser.print_help()
            return 0

        if args.version:
            print_info(f"{parser.prog} {__version__}")
            return 0

        store, client = _initialize_application(args)

        if args.file is None:
            if args.userhash is not None:
                handle_save_userhash_command(store, args.userhash)
                return 0
            raise MissingFilePath()

        handle_upload_command(
            client,
            store,
            args.file,
            anon=args.anon,
            userhash=args.userhash,
            time_option=args.time,
        )
        return 0
    except CatboxError as e:
        if e.exit_code == 0:
            print_info(e.message)
        else:
            logger.error(e.message)
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("Upload cancelled by user.")
        return 1


def main(argv: Optional[List[str]] = None):
    """Main entry point for the catbox-uploader command."""
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
