"""Join-code generation and allocation."""

from __future__ import annotations

import logging
import random
import secrets
from collections.abc import Callable

from roomlobby.rooms.errors import JoinCodeConflictError

# 0/O and 1/I are left out so codes survive being read aloud or retyped.
JOIN_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
JOIN_CODE_LENGTH = 6

logger = logging.getLogger(__name__)


def generate_join_code(rng: random.Random | None = None) -> str:
    """Draw one code uniformly from the join-code alphabet."""
    chooser = rng or secrets.SystemRandom()
    return "".join(chooser.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH))


def normalize_join_code(raw_code: str) -> str:
    """Codes are matched case-insensitively and stored upper-case."""
    return raw_code.strip().upper()


class JoinCodeAllocator:
    """Generate codes until one is not used by any live room.

    The existence check is a best-effort pre-check; the UNIQUE constraint on
    rooms.join_code decides races between concurrent allocators.
    """

    def __init__(
        self,
        code_exists: Callable[[str], bool],
        *,
        rng: random.Random | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._code_exists = code_exists
        self._rng = rng or secrets.SystemRandom()
        self._max_attempts = max_attempts

    def allocate(self) -> str:
        """Return a code that was free at the time of its check."""
        attempts = 0
        while self._max_attempts is None or attempts < self._max_attempts:
            attempts += 1
            code = generate_join_code(self._rng)
            if not self._code_exists(code):
                return code
            logger.debug("join code %s already in use (attempt %d)", code, attempts)
        raise JoinCodeConflictError(f"no free join code after {attempts} attempts")
