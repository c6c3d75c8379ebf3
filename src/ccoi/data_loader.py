import json
import logging
from pathlib import Path

from ccoi.directory import build_speakers
from ccoi.models import Day, MenuIcon, MenuItem, Session, SpeakerProfile

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def _read_json(path: Path, default):
    """Read a JSON data file, falling back to default when missing or corrupt."""
    if not path.exists():
        return default
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read data file %s: %s", path, exc)
        return default


def _text(value) -> str:
    return value if isinstance(value, str) else ""


def _names(value) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(name for name in value if isinstance(name, str))


def session_from_dict(data: dict) -> Session:
    """Build a Session from one agenda record, defaulting optional fields."""
    return Session(
        time=_text(data.get("time")),
        title=_text(data.get("title")),
        location=_text(data.get("location")),
        block=_text(data.get("block")),
        theme=_text(data.get("theme")),
        description=_text(data.get("description")),
        speakers=_names(data.get("speakers")),
        moderators=_names(data.get("moderators")),
        panelists=_names(data.get("panelists")),
        chairs=_names(data.get("chairs")),
    )


def days_from_dict(data: dict) -> list[Day]:
    """Build Days from the agenda mapping, keeping the file's day order."""
    days = []
    for key, info in data.items():
        if not isinstance(info, dict):
            logger.warning("Skipping malformed day %r in agenda", key)
            continue
        raw_sessions = info.get("sessions")
        if not isinstance(raw_sessions, list):
            if raw_sessions is not None:
                logger.warning("Ignoring sessions of day %r: expected a list", key)
            raw_sessions = []
        sessions = []
        for idx, raw in enumerate(raw_sessions):
            if not isinstance(raw, dict):
                logger.warning("Skipping malformed session %d of day %r", idx, key)
                continue
            sessions.append(session_from_dict(raw))
        days.append(Day(
            key=key,
            title=_text(info.get("title")),
            date=_text(info.get("date")),
            sessions=tuple(sessions),
        ))
    return days


def load_days(path: Path | None = None) -> list[Day]:
    """Load the agenda from the bundled JSON dataset."""
    data = _read_json(path or DATA_DIR / "agenda.json", {})
    return days_from_dict(data) if isinstance(data, dict) else []


def load_speaker_images(path: Path | None = None) -> dict[str, str]:
    """Load the slug -> image path mapping, if one has been generated."""
    data = _read_json(path or DATA_DIR / "speaker-images.json", {})
    if not isinstance(data, dict):
        return {}
    return {str(slug): str(image) for slug, image in data.items()}


def load_menu(path: Path | None = None) -> list[MenuItem]:
    """Load dashboard menu entries."""
    data = _read_json(path or DATA_DIR / "menu.json", [])
    items = []
    for entry in data if isinstance(data, list) else []:
        if not isinstance(entry, dict):
            logger.warning("Skipping malformed menu entry %r", entry)
            continue
        items.append(MenuItem(
            title=entry.get("title", ""),
            icon=MenuIcon.from_name(entry.get("icon", "")),
            link=entry.get("link", ""),
            external=bool(entry.get("external", False)),
        ))
    return items


class DataLoader:
    """Session record store backed by the JSON dataset."""

    def __init__(self, data_dir: Path | None = None):
        self.data_dir = data_dir or DATA_DIR
        self._days = load_days(self.data_dir / "agenda.json")
        self._images = load_speaker_images(self.data_dir / "speaker-images.json")

    @property
    def source_name(self) -> str:
        return str(self.data_dir / "agenda.json")

    def get_all_days(self) -> list[Day]:
        return list(self._days)

    def get_day(self, key: str) -> Day | None:
        for day in self._days:
            if day.key == key:
                return day
        return None

    def get_speakers(self) -> list[SpeakerProfile]:
        """Speaker directory, rebuilt from the sessions on every call."""
        return build_speakers(self._days)

    def get_speaker_images(self) -> dict[str, str]:
        return dict(self._images)

    def get_menu(self) -> list[MenuItem]:
        return load_menu(self.data_dir / "menu.json")

    def session_count(self) -> int:
        return sum(len(day.sessions) for day in self._days)
