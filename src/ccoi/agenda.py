import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from ccoi.models import Day, Session

ALL_THEMES = "All"

TIME_RANGE_RE = re.compile(r"[-–]")


def session_id(session: Session) -> str:
    """Favorite/deep-link identifier: the block if set, else the display time."""
    return session.block or session.time


def split_time(text: str) -> tuple[str, str]:
    """Split '09:00-09:30' (hyphen or en-dash) into start and end."""
    parts = TIME_RANGE_RE.split(text, maxsplit=1)
    if len(parts) == 2:
        return parts[0].strip(), parts[1].strip()
    return text.strip(), ""


def group_by_theme(sessions: Iterable[Session]) -> dict[str, list[Session]]:
    """Group sessions by theme, keys in first-seen order."""
    groups: dict[str, list[Session]] = {}
    for session in sessions:
        groups.setdefault(session.theme_label, []).append(session)
    return groups


def available_themes(sessions: Iterable[Session]) -> list[str]:
    return [ALL_THEMES, *group_by_theme(sessions)]


def _matches_query(session: Session, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    haystack = [session.title, session.description]
    haystack.extend(session.speakers)
    haystack.extend(session.moderators)
    haystack.extend(session.panelists)
    return any(needle in text.lower() for text in haystack)


def filter_sessions(
    sessions: Iterable[Session],
    query: str = "",
    theme: str = ALL_THEMES,
    favorites_only: bool = False,
    favorites: Iterable[str] = frozenset(),
) -> list[Session]:
    """Apply search, theme and favorites filters, preserving order."""
    favorites = frozenset(favorites)
    return [
        s for s in sessions
        if _matches_query(s, query)
        and (theme == ALL_THEMES or s.theme_label == theme)
        and (not favorites_only or session_id(s) in favorites)
    ]


def toggle_favorite(favorites: Iterable[str], sid: str) -> frozenset[str]:
    """Return a new set with sid removed if present, added otherwise."""
    current = frozenset(favorites)
    if sid in current:
        return current - {sid}
    return current | {sid}


@dataclass
class AgendaView:
    """Filtered sessions of one day, grouped by theme."""

    day: Day
    groups: dict[str, list[Session]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(len(sessions) for sessions in self.groups.values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def build_agenda_view(
    day: Day,
    query: str = "",
    theme: str = ALL_THEMES,
    favorites_only: bool = False,
    favorites: Iterable[str] = frozenset(),
) -> AgendaView:
    visible = filter_sessions(day.sessions, query, theme, favorites_only, favorites)
    return AgendaView(day=day, groups=group_by_theme(visible))
