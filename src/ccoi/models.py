from dataclasses import dataclass, field
from enum import Enum


DEFAULT_THEME = "Other"


@dataclass(frozen=True)
class Session:
    """A scheduled talk or panel block."""

    time: str
    title: str
    location: str = ""
    block: str = ""
    theme: str = ""
    description: str = ""
    speakers: tuple[str, ...] = ()
    moderators: tuple[str, ...] = ()
    panelists: tuple[str, ...] = ()
    chairs: tuple[str, ...] = ()

    @property
    def theme_label(self) -> str:
        return self.theme or DEFAULT_THEME


@dataclass(frozen=True)
class Day:
    """A conference day (track) with its ordered sessions."""

    key: str
    title: str = ""
    date: str = ""
    sessions: tuple[Session, ...] = ()


class Role(Enum):
    SPEAKERS = "speakers"
    MODERATORS = "moderators"
    PANELISTS = "panelists"
    CHAIRS = "chairs"


# Whether appearing in a role adds the session to the person's profile.
# Moderators, panelists and chairs get a directory entry but no session list.
ROLE_POLICY = {
    Role.SPEAKERS: True,
    Role.MODERATORS: False,
    Role.PANELISTS: False,
    Role.CHAIRS: False,
}


@dataclass(frozen=True)
class SessionSummary:
    """A session as listed on a speaker's profile."""

    day_key: str
    day_title: str
    date: str
    time: str
    block: str
    title: str
    theme: str
    location: str


@dataclass
class SpeakerProfile:
    """A deduplicated speaker identity."""

    slug: str
    display_name: str
    sessions: list[SessionSummary] = field(default_factory=list)


@dataclass(frozen=True)
class Avatar:
    """Speaker picture: an image path when known, else a monogram."""

    image: str = ""
    monogram: str = ""


class MenuIcon(Enum):
    INFO = "Info"
    CLIPBOARD_LIST = "ClipboardList"
    CALENDAR = "Calendar"
    MIC = "Mic2"
    USERS = "Users"
    HOME = "Home"
    MAIL = "Mail"

    @classmethod
    def from_name(cls, name: str) -> "MenuIcon":
        """Resolve an icon name from menu data, defaulting to INFO."""
        for icon in cls:
            if icon.value == name:
                return icon
        return cls.INFO


@dataclass(frozen=True)
class MenuItem:
    """A dashboard menu entry."""

    title: str
    icon: MenuIcon = MenuIcon.INFO
    link: str = ""
    external: bool = False
