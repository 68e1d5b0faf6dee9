#!/usr/bin/env python3
"""Check a Raft snapshots configuration and report every problem found."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import cast

import yaml
from pydantic import ValidationError

from raft_snapshots import constants
from raft_snapshots.loader import (
    load_snapshots_settings,
    read_config_file,
    snapshots_section,
)
from raft_snapshots.violations import InvalidSnapshotsConfigError, SnapshotsConfigError


class Args(argparse.Namespace):
    config: Path | None
    min_entries_to_snapshot: int | None
    snapshot_check_interval: int | None
    snapshots_directory: str | None
    disable_snapshots: bool
    log_level: str
    rich_logs: bool
    print_config: bool


logger = logging.getLogger(__name__)


def parse_args() -> Args:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Raft snapshots configuration checker",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML or JSON configuration file (full agent config or the snapshots block)",
    )

    # Configuration overrides (take precedence over the config file)
    snapshots_group = parser.add_mutually_exclusive_group()
    snapshots_group.add_argument(
        "--min-entries-to-snapshot",
        type=int,
        help="Minimum number of committed entries before a snapshot is made",
    )

    snapshots_group.add_argument(
        "--disable-snapshots",
        action="store_true",
        help="Never snapshot based on the number of committed entries",
    )

    parser.add_argument(
        "--snapshot-check-interval",
        type=int,
        help="Interval in milliseconds at which to check whether a snapshot should be made",
    )

    parser.add_argument(
        "--snapshots-directory",
        help="Directory in which snapshot files are stored",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set the logging level",
    )

    parser.add_argument(
        "--rich-logs",
        action="store_true",
        help="Enable rich colored logging output",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved configuration as JSON",
    )

    return cast(Args, parser.parse_args())


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich colored logging
    """
    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[
                RichHandler(
                    console=Console(stderr=True),
                    show_path=True,
                    show_time=True,
                    show_level=True,
                    markup=True,
                    rich_tracebacks=True,
                )
            ],
        )
    else:
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s [%(name)s:%(filename)s:%(lineno)d] %(levelname)s: %(message)s",
        )


def main() -> int:
    """Main function."""
    args = parse_args()

    configure_logging(args.log_level, args.rich_logs)

    try:
        section = {}

        if args.config:
            logger.info("Loading configuration from %s", args.config)
            section = snapshots_section(read_config_file(args.config))

        settings = load_snapshots_settings(
            section,
            overrides={
                "min_entries_to_snapshot": (
                    constants.SNAPSHOTS_DISABLED
                    if args.disable_snapshots
                    else args.min_entries_to_snapshot
                ),
                "snapshot_check_interval": args.snapshot_check_interval,
                "snapshots_directory": args.snapshots_directory,
            },
        )

        logger.info("Snapshots configuration is valid: %s", settings)

        if args.print_config:
            print(json.dumps(settings.to_config(), indent=2, sort_keys=True))

    except ValidationError as e:
        logger.error(
            "Invalid config\n"
            + "\n".join(
                [
                    f"{'.'.join([str(loc) for loc in err['loc']])}: {err['msg']} (got {err['input']})"
                    for err in e.errors()
                ]
            )
        )
        return 1
    except InvalidSnapshotsConfigError as e:
        logger.error("%s", e)
        return 1
    except SnapshotsConfigError as e:
        logger.error("Unusable configuration file: %s", e)
        return 1
    except yaml.YAMLError as e:
        logger.error("YAML parsing error in %s: %s", args.config, e)
        return 1
    except FileNotFoundError as e:
        logger.error("Configuration file not found: %s", e)
        return 1
    except Exception as e:
        logger.error("Error checking configuration: %s", e, exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
