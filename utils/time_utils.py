"""Clock and display-date helpers."""

import time
from datetime import datetime


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def format_display_date(dt: datetime) -> str:
    """Short date for testimonial cards, e.g. 3/7/2025."""
    return f"{dt.month}/{dt.day}/{dt.year}"
