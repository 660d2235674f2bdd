"""Date and time formatting for snapshot headers, folders and filenames.

All names are English and independent of the process locale, so the same
instant always produces the same strings.
"""

from datetime import datetime
from typing import Tuple

DAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _clock_12h(moment: datetime) -> Tuple[int, str]:
    """Hour on a 12-hour clock (midnight and noon are 12) and its am/pm suffix."""
    return moment.hour % 12 or 12, "pm" if moment.hour >= 12 else "am"


def format_human_date(moment: datetime) -> str:
    """Human-readable timestamp used in the document header.

    Example:
        >>> format_human_date(datetime(2025, 11, 22, 5, 5))
        'Sat, November 22, 2025 @ 5:05am'
    """
    hour, suffix = _clock_12h(moment)
    return (
        f"{DAY_ABBREVIATIONS[moment.weekday()]}, {MONTH_NAMES[moment.month - 1]} {moment.day}, "
        f"{moment.year} @ {hour}:{moment.minute:02d}{suffix}"
    )


def format_date_folder(moment: datetime) -> str:
    """Name of the per-day folder snapshots are grouped in.

    Example:
        >>> format_date_folder(datetime(2025, 11, 22, 17, 55))
        'Sat-11-22-2025'
    """
    return f"{DAY_ABBREVIATIONS[moment.weekday()]}-{moment.month:02d}-{moment.day:02d}-{moment.year}"


def format_snapshot_filename(moment: datetime, extension: str = ".md") -> str:
    """Filename of a snapshot taken at ``moment``.

    Example:
        >>> format_snapshot_filename(datetime(2025, 11, 22, 17, 55))
        'snap-Sat-11-22-2025--5-55-pm.md'
    """
    hour, suffix = _clock_12h(moment)
    return f"snap-{format_date_folder(moment)}--{hour}-{moment.minute:02d}-{suffix}{extension}"
