import argparse
import logging
import os
import sys
from typing import List, Optional

from .errors import CommandError, ExtractError, FileReadError
from .export import extract_blocks_to_file
from .extract import iter_addresses, retrieve_blocks
from .models.registry import Registry
from .utils.fs import check_file_exists, check_valid_extension, find_config_files, read_file_to_lines

VALID_COMMANDS = ("list", "extract")

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Configure the package logger for command-line use and return it."""
    logger = logging.getLogger("tfblocks")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfblocks",
        description="List or extract the top-level blocks of a terraform file",
    )
    parser.add_argument("-f", "--file", default="", help="path of terraform file (or directory, for list)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable verbose logging")
    parser.add_argument("-b", "--block", default="default", help="type of block to extract")
    parser.add_argument("-n", "--name", default=None, help="extract only the named block of that type")
    parser.add_argument(
        "command",
        nargs="?",
        default="list",
        help=f"one of: {', '.join(VALID_COMMANDS)} (default: list)",
    )
    return parser


def _load_registry(paths: List[str], logger: logging.Logger) -> Registry:
    registry = Registry()
    for path in paths:
        lines = read_file_to_lines(path)
        logger.debug("Read %d line(s) from %s", len(lines), path)
        registry = retrieve_blocks(lines, registry=registry, logger=logger)
    return registry


def run(args: argparse.Namespace, logger: logging.Logger) -> int:
    if not args.file:
        logger.error("No file path provided, check usage with -h")
        return 1

    directory_mode = os.path.isdir(args.file)
    if not directory_mode and (
        not check_file_exists(args.file) or not check_valid_extension(args.file, logger=logger)
    ):
        logger.error("Check that file exists and is of .tf type")
        return 1

    try:
        if args.command not in VALID_COMMANDS:
            raise CommandError(f"Invalid command provided: {args.command}")
        if directory_mode and args.command != "list":
            raise CommandError(f"Command '{args.command}' needs a single file, got directory {args.file}")

        logger.info("Starting terraform file parser...")
        paths = find_config_files(args.file) if directory_mode else [args.file]
        registry = _load_registry(paths, logger)

        if args.command == "list":
            for address in iter_addresses(registry):
                logger.debug(address)
                print(address)
        else:
            target = extract_blocks_to_file(
                registry, args.block, args.file, block_name=args.name, logger=logger
            )
            logger.info("Wrote %s", target)
    except (CommandError, FileReadError, ExtractError) as e:
        logger.error(str(e))
        return 1

    logger.info("Parsing completed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the `tfblocks` command."""
    args = build_parser().parse_args(argv)
    logger = setup_logger(args.verbose)
    return run(args, logger)


if __name__ == "__main__":
    sys.exit(main())
