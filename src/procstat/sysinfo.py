"""Platform facts needed to interpret /proc records."""

import os


def page_size() -> int:
    """Size of a memory page in bytes."""
    return os.sysconf("SC_PAGE_SIZE")


def clock_ticks() -> int:
    """Number of clock ticks per second used for CPU time accounting."""
    return os.sysconf("SC_CLK_TCK")
