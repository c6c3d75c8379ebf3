from ccoi.storage import KeyValueStore

ACCESS_CODE = "CCOI2026"
ACCESS_KEY = "ccoi_access"


class AccessGate:
    """Shared-code login gate.

    This only keeps casual visitors on the login screen; the code ships with
    the client and is not a security boundary.
    """

    def __init__(self, store: KeyValueStore, code: str = ACCESS_CODE):
        self.store = store
        self.code = code

    def is_unlocked(self) -> bool:
        return self.store.get(ACCESS_KEY) == "true"

    def unlock(self, entered: str) -> bool:
        """Check an entered code, remembering a match."""
        if entered.strip() != self.code:
            return False
        self.store.set(ACCESS_KEY, "true")
        return True

    def lock(self):
        self.store.delete(ACCESS_KEY)
