"""WebHook subscription endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPMethod

from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, RequestSpec
from maxbot.types.base import SimpleQueryResult
from maxbot.types.common import Subscription, SubscriptionList, SubscriptionRequestBody


class SubscriptionsMixin(BaseClient):
    async def subscribe(
        self,
        url: str,
        update_types: Sequence[str] | None = None,
        secret: str = "",
        *,
        deadline: Deadline | None = None,
    ) -> SimpleQueryResult:
        """Deliver updates to ``url`` instead of long polling.

        Args:
            url: HTTPS endpoint receiving updates
            update_types: Update types to deliver; all when empty
            secret: Sent back by the server in the ``X-Max-Bot-Api-Secret`` header
        """
        body = SubscriptionRequestBody(url=url, secret=secret or None, update_types=list(update_types or ()) or None)
        spec = RequestSpec("Subscribe", HTTPMethod.POST, "/subscriptions", body=body, result=SimpleQueryResult)
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def unsubscribe(self, url: str, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        """Remove a WebHook subscription; long polling works again afterwards."""
        spec = RequestSpec(
            "Unsubscribe", HTTPMethod.DELETE, "/subscriptions", query={"url": url}, result=SimpleQueryResult
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def get_subscriptions(self, *, deadline: Deadline | None = None) -> list[Subscription]:
        spec = RequestSpec("GetSubscriptions", HTTPMethod.GET, "/subscriptions", result=SubscriptionList)
        result: SubscriptionList = await self.execute(spec, deadline=deadline)
        return result.subscriptions
