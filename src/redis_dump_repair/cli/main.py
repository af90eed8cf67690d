"""Main CLI entry point for the redis-dump-repair command-line tool.

Usage:
    redis-dump-repair INPUT OUTPUT

Reads the dump at INPUT and writes the repaired dump to OUTPUT. Any error is
reported on stderr and ends the process with a non-zero status.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from redis_dump_repair import __version__
from redis_dump_repair.api import repair_file
from redis_dump_repair.shared import (
    InputFileError,
    OutputFileError,
    RepairConfig,
    TokenizationError,
    configure_logging,
    get_logger,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="redis-dump-repair",
        description="Repair malformed dumps produced by the redis-dump NPM package."
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "input_file",
        type=Path,
        help="Dump produced by redis-dump"
    )
    parser.add_argument(
        "output_file",
        type=Path,
        help="Path of the repaired dump (created or truncated)"
    )

    return parser


def run(input_file: Path, output_file: Path, config: RepairConfig) -> int:
    """Repair one dump and report failures on stderr."""
    logger = get_logger(__name__, config.correlation_id, "cli")

    try:
        result = repair_file(input_file, output_file, config)
    except (InputFileError, OutputFileError) as e:
        logger.error(
            f"Repair failed while {e.action}",
            extra={"path": str(e.path), "error": str(e.cause)}
        )
        print(f"Error {e.action}: {e.cause}", file=sys.stderr)
        return EXIT_FAILURE
    except TokenizationError as e:
        logger.error(
            "Repair failed while parsing input file",
            extra={"offset": e.offset, "error": str(e)}
        )
        print(f"Error parsing input file: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except Exception:
        logger.exception("Unexpected error during repair")
        raise

    logger.info(
        "Wrote repaired dump",
        extra={"output": str(output_file), "lines": result.metrics.lines}
    )
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    config = RepairConfig.default()
    configure_logging(config.logging_level)

    try:
        return run(args.input_file, args.output_file, config)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
