from __future__ import annotations

import argparse
import logging
from pathlib import Path

from atime_audit.auditconfig import AuditConfig
from atime_audit.auditconfig import write_new_config
from atime_audit.auditerrors import AuditError
from atime_audit.auditor import Auditor

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_FILE = "atime_audit.log"

logger = logging.getLogger("atime_audit")


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="atime-audit",
        description="Report the last access time of every file in a directory.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        help="Descend into subdirectories. Default: False.",
        default=False,
        action="store_true",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=str,
        help="The directory to audit. Default: . (or the config file value).",
        default=None,
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="The path to an optional configuration file.",
        default=None,
    )
    parser.add_argument(
        "--debug",
        help="Enable debug logging.",
        default=False,
        action="store_true",
    )
    parser.add_argument(
        "--log-file",
        help="Enable logging to a file next to the config file.",
        default=False,
        action="store_true",
    )
    parser.add_argument(
        "--make-config",
        help="Create a default configuration file at the --config path.",
        default=False,
        action="store_true",
    )
    namespace = parser.parse_args(args)

    if namespace.make_config and not namespace.config:
        parser.error("--make-config requires --config")

    return namespace


def add_file_handler_to_logging(config_filepath: str | None) -> None:
    """Add a file handler to the root logger next to the config file, if any."""
    if config_filepath:
        filepath = Path(config_filepath).absolute()
        log_filepath = filepath.parent / f"{filepath.stem}.log"
    else:
        log_filepath = Path(DEFAULT_LOG_FILE).absolute()

    file_handler = logging.FileHandler(log_filepath)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logging.getLogger().addHandler(file_handler)


def main(*, cli_args: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(cli_args)

    if args.make_config:
        write_new_config(args.config)
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    if args.log_file:
        add_file_handler_to_logging(args.config)

    try:
        config = AuditConfig(args.config)
        config.override(
            root_directory=args.directory,
            recursive=True if args.recursive else None,
        )
        Auditor(config).run_once()

    except (OSError, AuditError, ValueError) as error:
        logger.error("Audit failed: %s", error)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
