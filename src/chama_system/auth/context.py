from __future__ import annotations

import threading
from typing import Optional

from ..members.model import Identity


class AuthContext:
    """Holds the currently authenticated identity for one serving scope.

    One instance per request (Flask boundary) or per client; never a module
    global. ``login`` overwrites any previous identity (last write wins).
    """

    def __init__(self, identity: Optional[Identity] = None):
        self._lock = threading.Lock()
        self._identity = identity

    def login(self, identity: Identity) -> None:
        with self._lock:
            self._identity = identity

    def logout(self) -> None:
        with self._lock:
            self._identity = None

    def current_identity(self) -> Optional[Identity]:
        with self._lock:
            return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self.current_identity() is not None
