"""Long-polling parameters and deadline coordination for GET /updates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from maxbot.constants import DEFAULT_POLLING_TIMEOUT_S, POLLING_BUFFER_S
from maxbot.deadline import Deadline
from maxbot.errors import PollDeadlineError


@dataclass(frozen=True)
class PollOptions:
    """Query of one GET /updates call.

    Attributes:
        limit: Maximum number of updates, 0 for the server default (100)
        timeout: Server-side poll duration in seconds, <= 0 for the default (30)
        marker: Cursor of the next update; None returns uncommitted updates
        types: Update type names to receive; empty for all
    """

    limit: int = 0
    timeout: int = DEFAULT_POLLING_TIMEOUT_S
    marker: int | None = None
    types: Sequence[str] = field(default_factory=tuple)

    @property
    def server_timeout(self) -> int:
        return self.timeout if self.timeout > 0 else DEFAULT_POLLING_TIMEOUT_S

    def to_query(self) -> dict[str, str | int]:
        query: dict[str, str | int] = {}
        if self.limit > 0:
            query["limit"] = self.limit
        query["timeout"] = self.server_timeout
        if self.marker is not None and self.marker > 0:
            query["marker"] = self.marker
        if self.types:
            query["types"] = ",".join(self.types)
        return query

    def with_marker(self, marker: int | None) -> PollOptions:
        return PollOptions(limit=self.limit, timeout=self.timeout, marker=marker, types=self.types)


def poll_deadline(server_timeout: float, deadline: Deadline | None) -> Deadline:
    """Deadline for a long-poll request.

    The server may hold the request for ``server_timeout`` seconds, so the
    call needs that long plus a buffer.

    Raises:
        PollDeadlineError: If the caller's deadline leaves less than that window
    """
    window = server_timeout + POLLING_BUFFER_S
    if deadline is None:
        return Deadline.after(window)
    remaining = deadline.remaining()
    if remaining < window:
        raise PollDeadlineError(remaining, window)
    return deadline
