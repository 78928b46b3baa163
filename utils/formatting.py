"""Display formatting helpers."""

MIB = 1024 * 1024


def format_megabytes(num_bytes: int) -> str:
    """Byte count as a short MB label, e.g. 2MB or 1.5MB."""
    return f"{num_bytes / MIB:g}MB"
