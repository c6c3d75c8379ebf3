import json

from ccoi.data_loader import DataLoader, load_days, load_menu, load_speaker_images
from ccoi.models import MenuIcon


AGENDA = {
    "myopia_day": {
        "title": "Myopia Day",
        "date": "Feb 3, 2026",
        "sessions": [
            {
                "time": "09:00-09:30",
                "block": "B1",
                "theme": "Keynotes",
                "title": "Opening Keynote",
                "location": "Hall A",
                "speakers": ["Jane Doe (Hong Kong)"],
            },
            {"time": "10:00-11:00", "title": "Panel", "location": "Room 2", "speakers": [],
             "moderators": ["Ben Lee"]},
        ],
    },
    "innovation_day": {"title": "Innovation Day", "date": "Feb 4, 2026", "sessions": []},
}


def write_json(path, data) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_days_defaults_optional_fields(tmp_path) -> None:
    path = tmp_path / "agenda.json"
    write_json(path, AGENDA)
    days = load_days(path)
    assert [d.key for d in days] == ["myopia_day", "innovation_day"]
    opening, panel = days[0].sessions
    assert opening.speakers == ("Jane Doe (Hong Kong)",)
    assert opening.moderators == ()
    assert panel.block == ""
    assert panel.theme_label == "Other"
    assert panel.description == ""
    assert panel.moderators == ("Ben Lee",)


def test_missing_and_corrupt_files_yield_empty_data(tmp_path) -> None:
    assert load_days(tmp_path / "missing.json") == []
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    assert load_days(broken) == []
    assert load_speaker_images(broken) == {}
    assert load_menu(broken) == []


def test_menu_icons_resolve_with_fallback(tmp_path) -> None:
    path = tmp_path / "menu.json"
    write_json(path, [
        {"title": "Agenda", "icon": "Calendar", "link": "/agenda"},
        {"title": "Register", "icon": "BookOpen", "link": "https://example.org", "external": True},
    ])
    agenda, register = load_menu(path)
    assert agenda.icon is MenuIcon.CALENDAR
    assert register.icon is MenuIcon.INFO
    assert register.external


def test_data_loader(tmp_path) -> None:
    write_json(tmp_path / "agenda.json", AGENDA)
    write_json(tmp_path / "speaker-images.json", {"jane-doe": "/images/speakers/jane-doe.jpg"})
    loader = DataLoader(tmp_path)
    assert loader.session_count() == 2
    assert loader.get_day("innovation_day").title == "Innovation Day"
    assert loader.get_day("missing") is None
    assert [p.slug for p in loader.get_speakers()] == ["ben-lee", "jane-doe"]
    assert loader.get_speaker_images() == {"jane-doe": "/images/speakers/jane-doe.jpg"}
    assert loader.get_menu() == []


def test_bundled_dataset_loads() -> None:
    loader = DataLoader()
    assert loader.session_count() > 0
    slugs = [p.slug for p in loader.get_speakers()]
    assert "jane-doe" in slugs
    assert "amy-tan" in slugs
    assert len(slugs) == len(set(slugs))


def test_non_string_names_are_dropped(tmp_path) -> None:
    path = tmp_path / "agenda.json"
    write_json(path, {"d": {"title": "D", "date": "Feb 3, 2026", "sessions": [
        {"time": "09:00", "title": "Talk", "speakers": [None, "Jane Doe", 42],
         "moderators": [None], "panelists": None},
    ]}})
    [day] = load_days(path)
    [session] = day.sessions
    assert session.speakers == ("Jane Doe",)
    assert session.moderators == ()
    assert session.panelists == ()
    loader = DataLoader(tmp_path)
    assert [p.slug for p in loader.get_speakers()] == ["jane-doe"]


def test_null_sessions_yield_empty_day(tmp_path) -> None:
    path = tmp_path / "agenda.json"
    write_json(path, {"d": {"title": "D", "date": "Feb 3, 2026", "sessions": None}})
    [day] = load_days(path)
    assert day.title == "D"
    assert day.sessions == ()


def test_malformed_session_entries_are_skipped(tmp_path) -> None:
    path = tmp_path / "agenda.json"
    write_json(path, {
        "d": {"title": "D", "date": "Feb 3, 2026", "sessions": [
            None, "Talk", ["x"], {"time": "09:00", "title": "Real Talk", "theme": None},
        ]},
        "e": {"title": "E", "sessions": "not a list"},
    })
    first, second = load_days(path)
    assert [s.title for s in first.sessions] == ["Real Talk"]
    assert first.sessions[0].theme_label == "Other"
    assert second.sessions == ()
    assert DataLoader(tmp_path).session_count() == 1


def test_malformed_menu_entries_are_skipped(tmp_path) -> None:
    path = tmp_path / "menu.json"
    write_json(path, [None, "Agenda", {"title": "Agenda", "icon": "Calendar", "link": "/agenda"}])
    [item] = load_menu(path)
    assert item.title == "Agenda"
