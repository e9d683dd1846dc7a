"""Reading and parsing of the per-process records under /proc."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from procstat.models import PageCountRecord, StatRecord

logger = logging.getLogger(__name__)

DEFAULT_PROC_ROOT = Path("/proc")

STATM = "statm"
STAT = "stat"
STATUS = "status"

STATM_FIELD_COUNT = 7
STAT_FIELD_COUNT = 15


class RecordError(Exception):
    """Base class for failures reading or parsing a record."""


class SourceUnavailable(RecordError):
    """A record source could not be opened or read."""

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.reason = error.strerror or str(error)
        super().__init__(f"Could not open {path}: {self.reason}")


class MalformedRecord(RecordError, ValueError):
    """A positional record is missing fields or holds an invalid value."""


def source_path(pid: int, name: str, proc_root: Path = DEFAULT_PROC_ROOT) -> Path:
    """Path of the record ``name`` for process ``pid``."""
    return proc_root / str(pid) / name


def open_source(path: Path) -> TextIO:
    """Open a record source for reading, raising SourceUnavailable on failure."""
    try:
        # Only "\n" ends a line; any "\r" stays part of the line
        return path.open(encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise SourceUnavailable(path, exc) from exc


def read_first_line(path: Path) -> str:
    """Read the single line of a one-line record and close the source."""
    with open_source(path) as source:
        try:
            line = source.readline()
        except OSError as exc:
            # The process can exit between open() and read()
            raise SourceUnavailable(path, exc) from exc
    logger.debug("Read %s: %r", path, line)
    return line


def iter_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a record source, without trailing newlines."""
    with open_source(path) as source:
        try:
            for line in source:
                yield line.rstrip("\n")
        except OSError as exc:
            raise SourceUnavailable(path, exc) from exc


def _to_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MalformedRecord(f"field {name!r} is not an integer: {value!r}") from None


def _to_count(name: str, value: str) -> int:
    count = _to_int(name, value)
    if count < 0:
        raise MalformedRecord(f"field {name!r} is negative: {value!r}")
    return count


def parse_statm(line: str) -> PageCountRecord:
    """
    Parse the seven page counts of a statm record.

    Every field is bound by name, including the ones never reported, so that
    a short record is detected instead of shifting the remaining values.

    Raises:
        MalformedRecord: if fewer than seven fields are present or a field
            is not a non-negative integer.
    """
    fields = line.split()
    if len(fields) < STATM_FIELD_COUNT:
        raise MalformedRecord(
            f"expected {STATM_FIELD_COUNT} fields, got {len(fields)}"
        )

    size, resident, shared, text, lib, data, dirty = fields[:STATM_FIELD_COUNT]

    return PageCountRecord(
        size=_to_count("size", size),
        resident=_to_count("resident", resident),
        shared=_to_count("shared", shared),
        text=_to_count("text", text),
        lib=_to_count("lib", lib),
        data=_to_count("data", data),
        dirty=_to_count("dirty", dirty),
    )


def split_stat_fields(line: str) -> list[str]:
    """
    Split a stat record into positional fields.

    The command name is written by the kernel in parentheses and may itself
    contain spaces or parentheses, so it spans from the first '(' to the
    last ')'. It is kept with its parentheses. A line without a
    parenthesized command is split on whitespace only.
    """
    line = line.rstrip("\n")
    open_paren = line.find("(")
    close_paren = line.rfind(")")
    if open_paren < 0 or close_paren < open_paren:
        return line.split()

    pid = line[:open_paren].strip()
    comm = line[open_paren : close_paren + 1]
    return [pid, comm, *line[close_paren + 1 :].split()]


def parse_stat(line: str) -> StatRecord:
    """
    Parse the leading fields of a stat record.

    Raises:
        MalformedRecord: if fewer than fifteen fields are present or a
            numeric field is not an integer.
    """
    fields = split_stat_fields(line)
    if len(fields) < STAT_FIELD_COUNT:
        raise MalformedRecord(
            f"expected at least {STAT_FIELD_COUNT} fields, got {len(fields)}"
        )

    (
        pid,
        comm,
        state,
        ppid,
        pgrp,
        session,
        tty_nr,
        tpgid,
        flags,
        minflt,
        cminflt,
        majflt,
        cmajflt,
        utime,
        stime,
    ) = fields[:STAT_FIELD_COUNT]

    return StatRecord(
        pid=_to_int("pid", pid),
        comm=comm,
        state=state,
        ppid=_to_int("ppid", ppid),
        pgrp=_to_int("pgrp", pgrp),
        session=_to_int("session", session),
        tty_nr=_to_int("tty_nr", tty_nr),
        tpgid=_to_int("tpgid", tpgid),
        flags=_to_int("flags", flags),
        minflt=_to_int("minflt", minflt),
        cminflt=_to_int("cminflt", cminflt),
        majflt=_to_int("majflt", majflt),
        cmajflt=_to_int("cmajflt", cmajflt),
        utime=_to_int("utime", utime),
        stime=_to_int("stime", stime),
    )
