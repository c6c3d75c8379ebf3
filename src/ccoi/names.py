import re

COUNTRY_SUFFIX_RE = re.compile(r"\s*\([^)]+\)\s*$")
NON_SLUG_RE = re.compile(r"[^a-z0-9]+")

PLACEHOLDER_NAMES = {"", "-", "tbc", "tbd"}
ROLE_LABEL_MARKERS = ("panelist", "moderator", "hosts & guests")

FALLBACK_SLUG = "speaker"


def strip_country(name: str) -> str:
    """Drop a trailing parenthesized suffix like ' (Hong Kong)'."""
    return COUNTRY_SUFFIX_RE.sub("", name).strip()


def normalize(raw_name: str) -> str:
    """Map a raw name to its canonical slug.

    "Jane Doe (Hong Kong)" and "jane  doe" both map to "jane-doe".
    """
    slug = NON_SLUG_RE.sub("-", strip_country(raw_name).lower()).strip("-")
    return slug or FALLBACK_SLUG


def is_linkable(raw_name: str) -> bool:
    """False for placeholders and role-label artifacts like 'Panelists'."""
    name = raw_name.strip().lower()
    if name in PLACEHOLDER_NAMES:
        return False
    return not any(marker in name for marker in ROLE_LABEL_MARKERS)


def has_country(name: str) -> bool:
    return COUNTRY_SUFFIX_RE.search(name) is not None


def prefer_name(a: str, b: str) -> str:
    """Pick the spelling that carries a country tag, favouring a on ties."""
    if has_country(a):
        return a
    if has_country(b):
        return b
    return a


def initials(name: str) -> str:
    """Monogram for speakers without a picture."""
    parts = name.split()
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0][:2].upper()
    return (parts[0][0] + parts[1][0]).upper()
