import logging
import re
import unicodedata
from collections.abc import Iterable

from ccoi.models import Avatar, Day, Role, ROLE_POLICY, Session, SessionSummary, SpeakerProfile
from ccoi.names import initials, is_linkable, normalize, prefer_name

logger = logging.getLogger(__name__)

HOSTS_MARKER = "Hosts:"
GUESTS_MARKER = "Guests:"
NAME_SEPARATOR_RE = re.compile(r"[,&]")


def _split_names(text: str) -> list[str]:
    return [part.strip() for part in NAME_SEPARATOR_RE.split(text) if part.strip()]


def parse_hosts_and_guests(speakers: Iterable[str]) -> list[str] | None:
    """Split a 'Hosts: ... Guests: ...' speaker entry into names.

    Returns None when the speakers are an ordinary list.
    """
    text = " ".join(speakers)
    if HOSTS_MARKER not in text or GUESTS_MARKER not in text:
        return None
    hosts_text = text.split(HOSTS_MARKER, 1)[1].split(GUESTS_MARKER, 1)[0]
    guests_text = text.split(GUESTS_MARKER, 1)[1].split(HOSTS_MARKER, 1)[0]
    return _split_names(hosts_text) + _split_names(guests_text)


def _summarize(day: Day, session: Session) -> SessionSummary:
    return SessionSummary(
        day_key=day.key,
        day_title=day.title,
        date=day.date,
        time=session.time,
        block=session.block,
        title=session.title,
        theme=session.theme,
        location=session.location,
    )


def _names_by_role(session: Session) -> list[tuple[Role, Iterable[str]]]:
    hosts_and_guests = parse_hosts_and_guests(session.speakers)
    return [
        (Role.SPEAKERS, session.speakers if hosts_and_guests is None else hosts_and_guests),
        (Role.MODERATORS, session.moderators),
        (Role.PANELISTS, session.panelists),
        (Role.CHAIRS, session.chairs),
    ]


def session_people(session: Session) -> list[tuple[str, str]]:
    """Linkable people of a session as (name, slug), first mention wins."""
    people: dict[str, str] = {}
    for _, names in _names_by_role(session):
        for raw_name in names:
            name = raw_name.strip()
            if name and is_linkable(name):
                people.setdefault(normalize(name), name)
    return [(name, slug) for slug, name in people.items()]


def _collation_key(name: str) -> tuple[str, str]:
    """Accent- and case-insensitive sort key, raw name as tiebreak."""
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return folded.casefold(), name


def build_speakers(days: Iterable[Day]) -> list[SpeakerProfile]:
    """Fold every session's people into a deduplicated speaker directory."""
    profiles: dict[str, SpeakerProfile] = {}

    for day in days:
        for session in day.sessions:
            for role, names in _names_by_role(session):
                for raw_name in names:
                    name = raw_name.strip()
                    if not name or not is_linkable(name):
                        continue
                    slug = normalize(name)
                    profile = profiles.get(slug)
                    if profile is None:
                        profile = SpeakerProfile(slug=slug, display_name=name)
                        profiles[slug] = profile
                    else:
                        profile.display_name = prefer_name(profile.display_name, name)
                    if ROLE_POLICY[role]:
                        profile.sessions.append(_summarize(day, session))

    logger.debug("Built %d speaker profiles", len(profiles))
    return sorted(profiles.values(), key=lambda p: _collation_key(p.display_name))


def group_by_letter(profiles: Iterable[SpeakerProfile]) -> dict[str, list[SpeakerProfile]]:
    """Index profiles by the first letter of their display name."""
    grouped: dict[str, list[SpeakerProfile]] = {}
    for profile in profiles:
        letter = profile.display_name[:1].upper() or "#"
        grouped.setdefault(letter, []).append(profile)
    return {letter: grouped[letter] for letter in sorted(grouped)}


def avatar_for(profile: SpeakerProfile, images: dict[str, str]) -> Avatar:
    image = images.get(profile.slug)
    if image:
        return Avatar(image=image)
    return Avatar(monogram=initials(profile.display_name))
