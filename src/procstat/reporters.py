"""
Reporters that print statistics for a single process.

Each reporter reads one record source, prints a block of text to stdout and
returns whether it did. A source that cannot be opened or parsed is logged
and the reporter returns without printing anything, so callers can keep
going with the next reporter.
"""

import logging
import time
from pathlib import Path

from procstat import sysinfo
from procstat.records import (
    DEFAULT_PROC_ROOT,
    STAT,
    STATM,
    STATUS,
    MalformedRecord,
    SourceUnavailable,
    iter_lines,
    parse_stat,
    parse_statm,
    read_first_line,
    source_path,
)
from procstat.units import scale_bytes, ticks_to_seconds

logger = logging.getLogger(__name__)

# Width of the widest memory label, "Data + Stack: "
MEMORY_LABEL_WIDTH = 14

# Prefixes of the status lines worth showing, checked in order. "Vm" and
# "Rss" cover every VmXxx/RssXxx field, whose set differs between kernels.
STATUS_PREFIXES: tuple[str, ...] = (
    "Name:",
    "Pid:",
    "State:",
    "PPid:",
    "Vm",
    "Rss",
)


def report_memory_usage(
    pid: int,
    proc_root: Path = DEFAULT_PROC_ROOT,
    page_size: int | None = None,
) -> bool:
    """
    Print memory usage from /proc/<pid>/statm.

    Args:
        pid: Process to inspect.
        proc_root: Root of the proc filesystem.
        page_size: Bytes per page. Queried from the system when omitted.
    """
    path = source_path(pid, STATM, proc_root)
    try:
        record = parse_statm(read_first_line(path))
    except SourceUnavailable as exc:
        logger.error("%s", exc)
        return False
    except MalformedRecord as exc:
        logger.error("Malformed record in %s: %s", path, exc)
        return False

    if page_size is None:
        page_size = sysinfo.page_size()
    logger.debug("Page size: %d bytes", page_size)

    lines = [f"Memory Usage Statistics for Process {pid}:"]
    for label, pages in (
        ("Virtual:", record.size),
        ("Resident:", record.resident),
        ("Shared:", record.shared),
        ("Text (Code):", record.text),
        ("Data + Stack:", record.data),
    ):
        magnitude = scale_bytes(pages * page_size)
        lines.append(f"{label:<{MEMORY_LABEL_WIDTH}}{pages} pages ({magnitude})")

    print("\n".join(lines))
    return True


def report_process_stats(
    pid: int,
    proc_root: Path = DEFAULT_PROC_ROOT,
    ticks_per_second: int | None = None,
) -> bool:
    """
    Print scheduling and fault counters from /proc/<pid>/stat.

    Also prints how long opening, reading and closing the record took.

    Args:
        pid: Process to inspect.
        proc_root: Root of the proc filesystem.
        ticks_per_second: Clock tick rate. Queried from the system when omitted.
    """
    path = source_path(pid, STAT, proc_root)
    try:
        start = time.perf_counter_ns()
        line = read_first_line(path)
        elapsed_us = (time.perf_counter_ns() - start) // 1000
        record = parse_stat(line)
    except SourceUnavailable as exc:
        logger.error("%s", exc)
        return False
    except MalformedRecord as exc:
        logger.error("Malformed record in %s: %s", path, exc)
        return False

    if ticks_per_second is None:
        ticks_per_second = sysinfo.clock_ticks()
    logger.debug("Clock ticks per second: %d", ticks_per_second)

    user_seconds = ticks_to_seconds(record.utime, ticks_per_second)
    kernel_seconds = ticks_to_seconds(record.stime, ticks_per_second)

    print(f"Process Statistics for Process {record.pid}:")
    print(f"Command: {record.comm}")
    print(f"State: {record.state}")
    print(f"Parent Process ID: {record.ppid}")
    print(f"Process Group ID: {record.pgrp}")
    print(f"Session ID: {record.session}")
    print(f"Minor Page Faults: {record.minflt}")
    print(f"Major Page Faults: {record.majflt}")
    print(f"Child Minor Page Faults: {record.cminflt}")
    print(f"Child Major Page Faults: {record.cmajflt}")
    print(f"User Mode Time: {user_seconds:g} seconds")
    print(f"Kernel Mode Time: {kernel_seconds:g} seconds")
    print(f"Time it took to get the data: {elapsed_us}us")
    return True


def is_reported_status_line(line: str) -> bool:
    """Check whether a status line matches one of STATUS_PREFIXES."""
    return any(line.startswith(prefix) for prefix in STATUS_PREFIXES)


def report_process_status(pid: int, proc_root: Path = DEFAULT_PROC_ROOT) -> bool:
    """Print the identity and memory lines of /proc/<pid>/status verbatim."""
    path = source_path(pid, STATUS, proc_root)
    try:
        # Collected first so a read failure part way through prints nothing
        lines = [line for line in iter_lines(path) if is_reported_status_line(line)]
    except SourceUnavailable as exc:
        logger.error("%s", exc)
        return False

    for line in lines:
        print(line)
    return True
