"""Long-polling endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator, Sequence
from http import HTTPMethod

from structlog import get_logger

from maxbot.constants import DEFAULT_POLLING_TIMEOUT_S
from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, RequestSpec
from maxbot.polling import PollOptions, poll_deadline
from maxbot.types.updates import Update, UpdateList

logger = get_logger(__name__)


class UpdatesMixin(BaseClient):
    async def get_updates(
        self,
        limit: int = 0,
        timeout: int = DEFAULT_POLLING_TIMEOUT_S,
        marker: int | None = None,
        types: Sequence[str] = (),
        *,
        deadline: Deadline | None = None,
    ) -> UpdateList:
        """Fetch updates with long polling (GET /updates).

        The server holds the request for up to ``timeout`` seconds. Without a
        deadline the call gets that long plus a buffer; a deadline shorter
        than that fails before anything is sent.

        Raises:
            PollDeadlineError: If ``deadline`` cannot cover the polling window
            BotAPIError: For any failure of the request itself
        """
        options = PollOptions(limit=limit, timeout=timeout, marker=marker, types=tuple(types))
        return await self._get_updates(options, deadline)

    async def _get_updates(self, options: PollOptions, deadline: Deadline | None) -> UpdateList:
        call_deadline = poll_deadline(options.server_timeout, deadline)
        spec = RequestSpec("GetUpdates", HTTPMethod.GET, "/updates", query=options.to_query(), result=UpdateList)
        result: UpdateList = await self.execute(spec, deadline=call_deadline)
        return result

    async def poll_updates(
        self,
        limit: int = 0,
        timeout: int = DEFAULT_POLLING_TIMEOUT_S,
        marker: int | None = None,
        types: Sequence[str] = (),
        *,
        deadline: Deadline | None = None,
    ) -> AsyncIterator[Update]:
        """Yield typed updates forever, advancing the marker after each batch.

        Unknown update types are skipped. Errors are raised to the consumer;
        iterate again with the last marker to resume.

        Example:
            async for update in client.poll_updates(types=["message_created"]):
                ...
        """
        options = PollOptions(limit=limit, timeout=timeout, marker=marker, types=tuple(types))
        while True:
            batch = await self._get_updates(options, deadline)
            updates = batch.decoded()
            logger.debug("polled updates", received=len(batch.updates or ()), decoded=len(updates), marker=batch.marker)
            for update in updates:
                yield update
            if batch.marker is not None:
                options = options.with_marker(batch.marker)
