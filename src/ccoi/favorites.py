import json
import logging
from collections.abc import Iterable

from ccoi.agenda import session_id, toggle_favorite
from ccoi.models import Day, Session
from ccoi.storage import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = "ccoi-favorites"


class FavoritesManager:
    """Owns the user's favorite sessions and their persistence."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._favorites: frozenset[str] = frozenset()
        self._load()

    def _load(self):
        """Read favorites once; a corrupt value starts an empty set."""
        raw = self.store.get(FAVORITES_KEY)
        if raw is None:
            return
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Could not parse stored favorites: %s", exc)
            return
        if not isinstance(data, list):
            logger.warning("Ignoring stored favorites: expected a list, got %s", type(data).__name__)
            return
        self._favorites = frozenset(str(sid) for sid in data)

    def _save(self):
        self.store.set(FAVORITES_KEY, json.dumps(sorted(self._favorites)))

    def toggle(self, sid: str) -> bool:
        """Toggle a session. Returns True if now a favorite."""
        self._favorites = toggle_favorite(self._favorites, sid)
        self._save()
        return sid in self._favorites

    def is_favorite(self, sid: str) -> bool:
        return sid in self._favorites

    @property
    def favorites(self) -> frozenset[str]:
        return self._favorites

    def get_favorite_sessions(self, days: Iterable[Day]) -> list[tuple[Day, Session]]:
        """Favorited sessions with their day, in agenda order."""
        return [
            (day, session)
            for day in days
            for session in day.sessions
            if session_id(session) in self._favorites
        ]
