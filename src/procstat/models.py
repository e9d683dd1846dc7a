"""Data models for procstat."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PageCountRecord:
    """Memory usage of a process, in pages, as listed in /proc/<pid>/statm."""

    size: int  # Total program size
    resident: int
    shared: int  # Resident pages backed by a file
    text: int
    lib: int  # Always 0 since Linux 2.6
    data: int  # Data + stack
    dirty: int  # Always 0 since Linux 2.6


@dataclass(slots=True, frozen=True)
class StatRecord:
    """Leading fields of /proc/<pid>/stat, in file order."""

    pid: int
    comm: str  # As written by the kernel, parentheses included
    state: str  # 'R', 'S', 'D', 'Z', 'T', etc.
    ppid: int
    pgrp: int
    session: int
    tty_nr: int
    tpgid: int
    flags: int
    minflt: int
    cminflt: int
    majflt: int
    cmajflt: int
    utime: int  # Clock ticks
    stime: int  # Clock ticks


@dataclass(slots=True, frozen=True)
class ByteMagnitude:
    """A byte count scaled down to a whole number of some unit."""

    quantity: int
    unit: str  # 'bytes', 'KiB', 'MiB' or 'GiB'

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit}"
