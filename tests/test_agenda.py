from ccoi.agenda import (
    available_themes,
    build_agenda_view,
    filter_sessions,
    group_by_theme,
    session_id,
    split_time,
    toggle_favorite,
)
from ccoi.models import Day, Session


def make_session(title: str, **kwargs) -> Session:
    kwargs.setdefault("time", "09:00-09:30")
    kwargs.setdefault("location", "Hall A")
    return Session(title=title, **kwargs)


SESSIONS = [
    make_session("Opening Keynote", block="B1", theme="Keynotes", speakers=("Jane Doe (Hong Kong)",)),
    make_session("Coffee Break", time="10:00-10:30"),
    make_session("Device Regulation", block="B2", theme="Panels",
                 moderators=("Ben Lee",), panelists=("Carol Wu",)),
    make_session("Atropine Update", block="B3", theme="Keynotes",
                 description="Low-dose atropine outcomes", speakers=("Amy Tan",)),
]


def test_session_id_prefers_block() -> None:
    assert session_id(SESSIONS[0]) == "B1"
    assert session_id(SESSIONS[1]) == "10:00-10:30"


def test_group_by_theme_partitions_in_first_seen_order() -> None:
    groups = group_by_theme(SESSIONS)
    assert list(groups) == ["Keynotes", "Other", "Panels"]
    assert [s.title for s in groups["Keynotes"]] == ["Opening Keynote", "Atropine Update"]
    flattened = [s for group in groups.values() for s in group]
    assert sorted(flattened, key=SESSIONS.index) == SESSIONS


def test_group_by_theme_empty() -> None:
    assert group_by_theme([]) == {}


def test_available_themes() -> None:
    assert available_themes(SESSIONS) == ["All", "Keynotes", "Other", "Panels"]


def test_unfiltered_returns_sessions_unchanged() -> None:
    result = filter_sessions(SESSIONS, "", "All", False, set())
    assert result == SESSIONS
    assert result is not SESSIONS


def test_query_matches_title_description_and_people() -> None:
    assert [s.title for s in filter_sessions(SESSIONS, "KEYNOTE")] == ["Opening Keynote"]
    assert [s.title for s in filter_sessions(SESSIONS, "low-dose")] == ["Atropine Update"]
    assert [s.title for s in filter_sessions(SESSIONS, "hong kong")] == ["Opening Keynote"]
    assert [s.title for s in filter_sessions(SESSIONS, "carol")] == ["Device Regulation"]
    assert [s.title for s in filter_sessions(SESSIONS, "ben lee")] == ["Device Regulation"]
    assert filter_sessions(SESSIONS, "hall a") == []


def test_theme_filter_uses_default_theme() -> None:
    assert [s.title for s in filter_sessions(SESSIONS, theme="Other")] == ["Coffee Break"]
    assert filter_sessions(SESSIONS, theme="Workshops") == []


def test_favorites_only() -> None:
    favorites = {"B3", "10:00-10:30"}
    result = filter_sessions(SESSIONS, favorites_only=True, favorites=favorites)
    assert [s.title for s in result] == ["Coffee Break", "Atropine Update"]
    assert filter_sessions(SESSIONS, favorites=favorites) == SESSIONS


def test_filters_combine() -> None:
    result = filter_sessions(SESSIONS, "a", "Keynotes", True, {"B1"})
    assert [s.title for s in result] == ["Opening Keynote"]


def test_toggle_favorite() -> None:
    assert toggle_favorite(set(), "B1") == {"B1"}
    assert toggle_favorite({"B1"}, "B1") == frozenset()
    original = {"B2"}
    assert toggle_favorite(original, "B1") == {"B1", "B2"}
    assert original == {"B2"}


def test_split_time() -> None:
    assert split_time("09:00-09:30") == ("09:00", "09:30")
    assert split_time("11:00 – 12:00") == ("11:00", "12:00")
    assert split_time("Morning") == ("Morning", "")


def test_agenda_view_reports_empty() -> None:
    day = Day(key="myopia_day", title="Myopia Day", date="Feb 3, 2026", sessions=tuple(SESSIONS))
    view = build_agenda_view(day, theme="Keynotes")
    assert list(view.groups) == ["Keynotes"]
    assert view.total == 2
    assert not view.is_empty
    empty = build_agenda_view(day, query="nothing matches this")
    assert empty.is_empty
    assert empty.groups == {}
