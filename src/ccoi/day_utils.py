import logging
import re
from datetime import datetime

logger = logging.getLogger(__name__)

DATE_FORMATS = ("%b %d, %Y", "%B %d, %Y", "%Y-%m-%d")

TIME_RE = re.compile(r"(\d{1,2})[:.](\d{2})\s*([AaPp][Mm])?")


def parse_day_date(date_str: str) -> datetime | None:
    """Parse a day date like 'Feb 3, 2026' into a datetime."""
    text = date_str.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    logger.warning("Unrecognized day date format: %r", date_str)
    return None


def parse_time(time_str: str, base_date: datetime) -> datetime | None:
    """Parse a time like '09:00' or '2:30 PM' onto base_date."""
    if not time_str:
        return None
    match = TIME_RE.search(time_str)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    meridiem = (match.group(3) or "").upper()
    if meridiem == "PM" and hour < 12:
        hour += 12
    elif meridiem == "AM" and hour == 12:
        hour = 0
    if hour > 23 or minute > 59:
        return None
    return base_date.replace(hour=hour, minute=minute, second=0)


def day_tab_label(title: str, date: str) -> str:
    """Short label for a day tab."""
    if title and date:
        return f"{title} ({date})"
    return title or date
