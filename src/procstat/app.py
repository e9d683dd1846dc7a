"""procstat - command-line entry point."""

import argparse
import logging
import sys
from collections.abc import Sequence

from procstat.config import load_settings
from procstat.reporters import (
    report_memory_usage,
    report_process_stats,
    report_process_status,
)

logger = logging.getLogger(__name__)

USAGE_EXIT_CODE = 1


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def process_id(value: str) -> int:
    """Parse a process ID argument."""
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid process ID: {value!r}") from None


def build_parser() -> ArgumentParser:
    """Create the command-line parser."""
    parser = ArgumentParser(
        prog="procstat",
        description="Print memory, scheduling and status information for a process.",
    )
    parser.add_argument("pid", type=process_id, help="ID of the process to inspect")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for procstat."""
    args = build_parser().parse_args(argv)
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Inspecting process %d under %s", args.pid, settings.proc_root)

    # A reporter that fails has already logged why; the rest still run
    report_memory_usage(args.pid, settings.proc_root)
    print()
    report_process_stats(args.pid, settings.proc_root)
    print()
    report_process_status(args.pid, settings.proc_root)

    return 0


if __name__ == "__main__":
    sys.exit(main())
