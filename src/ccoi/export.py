from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path

from ccoi.agenda import session_id, split_time
from ccoi.day_utils import parse_day_date, parse_time
from ccoi.models import Day, Session


def _people_lines(session: Session) -> list[str]:
    lines = []
    for label, names in (
        ("Speakers", session.speakers),
        ("Moderators", session.moderators),
        ("Panelists", session.panelists),
        ("Chairs", session.chairs),
    ):
        if names:
            lines.append(f"{label}: {', '.join(names)}")
    return lines


def export_ical(sessions: Iterable[tuple[Day, Session]], output_path: Path) -> int:
    """Export favorite sessions to an iCal file. Returns the event count."""
    from icalendar import Calendar, Event

    cal = Calendar()
    cal.add("prodid", "-//CCOI Asia 2026 Companion//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("x-wr-calname", "CCOI Asia 2026")

    count = 0
    for day, session in sessions:
        base_date = parse_day_date(day.date)
        if not base_date:
            continue
        start_str, end_str = split_time(session.time)
        start = parse_time(start_str, base_date)
        end = parse_time(end_str, base_date)
        if not start:
            continue
        if not end or end <= start:
            end = start + timedelta(hours=1)

        event = Event()
        event.add("summary", session.title)
        event.add("dtstart", start)
        event.add("dtend", end)
        if session.location:
            event.add("location", session.location)
        description_parts = []
        if session.theme:
            description_parts.append(f"Theme: {session.theme}")
        description_parts.extend(_people_lines(session))
        if session.description:
            description_parts.append(f"\n{session.description}")
        event.add("description", "\n".join(description_parts))
        event.add("uid", f"{day.key}-{session_id(session)}@ccoi2026")
        cal.add_component(event)
        count += 1

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(cal.to_ical())
    return count
