"""Bot profile endpoints."""

from __future__ import annotations

from http import HTTPMethod

from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, RequestSpec
from maxbot.types.bots import BotInfo, BotPatch


class BotsMixin(BaseClient):
    async def get_bot(self, *, deadline: Deadline | None = None) -> BotInfo:
        """Profile of the current bot (GET /me)."""
        spec = RequestSpec("GetBot", HTTPMethod.GET, "/me", result=BotInfo)
        result: BotInfo = await self.execute(spec, deadline=deadline)
        return result

    async def edit_bot(self, patch: BotPatch, *, deadline: Deadline | None = None) -> BotInfo:
        """Edit the current bot (PATCH /me). Unset fields stay unchanged."""
        spec = RequestSpec("EditBot", HTTPMethod.PATCH, "/me", body=patch, result=BotInfo)
        result: BotInfo = await self.execute(spec, deadline=deadline)
        return result
