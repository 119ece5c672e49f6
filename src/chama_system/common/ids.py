from __future__ import annotations

import secrets

from ..core.constants import ID_ENTROPY_BYTES


def new_id() -> str:
    """Opaque 128-bit random identifier (hex).

    ``secrets`` draws from the OS CSPRNG, so concurrent callers need no lock.
    """
    return secrets.token_hex(ID_ENTROPY_BYTES)
