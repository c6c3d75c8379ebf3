from icalendar import Calendar

from ccoi.export import export_ical
from ccoi.models import Day, Session


def test_export_ical(tmp_path) -> None:
    day = Day(key="myopia_day", title="Myopia Day", date="Feb 3, 2026")
    keynote = Session(time="09:00-09:30", block="B1", title="Opening Keynote", location="Hall A",
                      theme="Keynotes", speakers=("Jane Doe",))
    open_ended = Session(time="14:00", title="Closing", location="Hall A")
    undated = Session(time="TBD", title="Floating")
    output = tmp_path / "out" / "ccoi.ics"

    count = export_ical([(day, keynote), (day, open_ended), (day, undated)], output)

    assert count == 2
    cal = Calendar.from_ical(output.read_bytes())
    events = [c for c in cal.walk() if c.name == "VEVENT"]
    first, second = events
    assert str(first["summary"]) == "Opening Keynote"
    assert first.decoded("dtstart").hour == 9
    assert first.decoded("dtend").minute == 30
    assert str(first["uid"]) == "myopia_day-B1@ccoi2026"
    assert "Speakers: Jane Doe" in str(first["description"])
    assert (second.decoded("dtend") - second.decoded("dtstart")).seconds == 3600
