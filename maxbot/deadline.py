"""Explicit call deadlines.

A ``Deadline`` is passed to client operations to bound how long a call may
take. It lives on the monotonic clock, the same clock the asyncio event loop
uses, so ``remaining()`` can be handed straight to ``asyncio.timeout``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Deadline:
    """Point in time (``time.monotonic()`` seconds) a call must finish by."""

    at: float

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        """Deadline ``seconds`` from now."""
        return cls(at=time.monotonic() + seconds)

    def remaining(self) -> float:
        """Seconds left until the deadline. Negative once it has passed."""
        return self.at - time.monotonic()

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0
