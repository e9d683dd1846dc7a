"""Unit conversions used by the reporters."""

from procstat.models import ByteMagnitude

# (boundary, label) pairs, smallest unit first
BYTE_UNITS: tuple[tuple[int, str], ...] = (
    (1, "bytes"),
    (1024, "KiB"),
    (1024**2, "MiB"),
    (1024**3, "GiB"),
)


def scale_bytes(count: int) -> ByteMagnitude:
    """
    Scale a byte count to the smallest unit it stays below 1024 of.

    Division truncates, so 1500 bytes is reported as 1 KiB. GiB is the
    largest unit; anything bigger is still expressed in GiB.
    """
    if count < 0:
        raise ValueError(f"byte count must be non-negative, got {count}")

    for boundary, label in BYTE_UNITS:
        if count < 1024 * boundary:
            return ByteMagnitude(count // boundary, label)

    boundary, label = BYTE_UNITS[-1]
    return ByteMagnitude(count // boundary, label)


def ticks_to_seconds(ticks: int, ticks_per_second: int) -> float:
    """Convert a CPU time in clock ticks to seconds."""
    return ticks / float(ticks_per_second)
