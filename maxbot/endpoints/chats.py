"""Chat, membership and pinning endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPMethod
from urllib.parse import quote

from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, QueryValue, RequestSpec
from maxbot.types.base import SimpleQueryResult
from maxbot.types.chats import (
    ActionRequestBody,
    Chat,
    ChatAdmin,
    ChatAdminsList,
    ChatList,
    ChatMember,
    ChatMembersList,
    ChatPatch,
    PinMessageBody,
    PinnedMessage,
    UserIdsList,
)
from maxbot.types.enums import SenderAction


class ChatsMixin(BaseClient):
    async def get_chat(self, chat_id: int, *, deadline: Deadline | None = None) -> Chat:
        """Chat by id (GET /chats/{chatId})."""
        spec = RequestSpec("GetChat", HTTPMethod.GET, f"/chats/{chat_id}", result=Chat)
        result: Chat = await self.execute(spec, deadline=deadline)
        return result

    async def get_chat_by_link(self, link: str, *, deadline: Deadline | None = None) -> Chat:
        """Chat or channel by its public link or username."""
        spec = RequestSpec("GetChatByLink", HTTPMethod.GET, f"/chats/{quote(link, safe='')}", result=Chat)
        result: Chat = await self.execute(spec, deadline=deadline)
        return result

    async def get_chats(self, count: int = 0, marker: int = 0, *, deadline: Deadline | None = None) -> ChatList:
        """Page of chats the bot participates in.

        Args:
            count: Page size, 0 for the server default (50)
            marker: Cursor from the previous page, 0 for the first page
        """
        query: dict[str, QueryValue] = {}
        if count > 0:
            query["count"] = count
        if marker > 0:
            query["marker"] = marker
        spec = RequestSpec("GetChats", HTTPMethod.GET, "/chats", query=query, result=ChatList)
        result: ChatList = await self.execute(spec, deadline=deadline)
        return result

    async def edit_chat(self, chat_id: int, patch: ChatPatch, *, deadline: Deadline | None = None) -> Chat:
        spec = RequestSpec("EditChat", HTTPMethod.PATCH, f"/chats/{chat_id}", body=patch, result=Chat)
        result: Chat = await self.execute(spec, deadline=deadline)
        return result

    async def delete_chat(self, chat_id: int, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        """Delete a chat for all participants."""
        spec = RequestSpec("DeleteChat", HTTPMethod.DELETE, f"/chats/{chat_id}", result=SimpleQueryResult)
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def get_members(
        self,
        chat_id: int,
        count: int = 0,
        marker: int = 0,
        user_ids: Sequence[int] | None = None,
        *,
        deadline: Deadline | None = None,
    ) -> ChatMembersList:
        """Page of chat members, optionally restricted to ``user_ids``."""
        query: dict[str, QueryValue] = {}
        if count > 0:
            query["count"] = count
        if marker > 0:
            query["marker"] = marker
        if user_ids:
            query["user_ids"] = ",".join(str(user_id) for user_id in user_ids)
        spec = RequestSpec(
            "GetMembers", HTTPMethod.GET, f"/chats/{chat_id}/members", query=query, result=ChatMembersList
        )
        result: ChatMembersList = await self.execute(spec, deadline=deadline)
        return result

    async def get_admins(self, chat_id: int, *, deadline: Deadline | None = None) -> ChatAdminsList:
        """Administrators of a chat. The bot must be an administrator."""
        spec = RequestSpec("GetAdmins", HTTPMethod.GET, f"/chats/{chat_id}/members/admins", result=ChatAdminsList)
        result: ChatAdminsList = await self.execute(spec, deadline=deadline)
        return result

    async def add_members(
        self, chat_id: int, user_ids: Sequence[int], *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        spec = RequestSpec(
            "AddMembers",
            HTTPMethod.POST,
            f"/chats/{chat_id}/members",
            body=UserIdsList(user_ids=list(user_ids)),
            result=SimpleQueryResult,
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def remove_member(
        self, chat_id: int, user_id: int, block: bool = False, *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        """Remove a member; ``block`` also bans them (chats with links only)."""
        query: dict[str, QueryValue] = {"user_id": user_id}
        if block:
            query["block"] = "true"
        spec = RequestSpec(
            "RemoveMember", HTTPMethod.DELETE, f"/chats/{chat_id}/members", query=query, result=SimpleQueryResult
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def set_admins(
        self, chat_id: int, admins: Sequence[ChatAdmin], *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        """Grant admin rights with the given permissions."""
        spec = RequestSpec(
            "SetAdmins",
            HTTPMethod.POST,
            f"/chats/{chat_id}/members/admins",
            body=ChatAdminsList(admins=list(admins)),
            result=SimpleQueryResult,
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def remove_admin(self, chat_id: int, user_id: int, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        spec = RequestSpec(
            "RemoveAdmin", HTTPMethod.DELETE, f"/chats/{chat_id}/members/admins/{user_id}", result=SimpleQueryResult
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def send_action(
        self, chat_id: int, action: SenderAction, *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        """Show an action such as ``typing_on`` in the chat."""
        spec = RequestSpec(
            "SendAction",
            HTTPMethod.POST,
            f"/chats/{chat_id}/actions",
            body=ActionRequestBody(action=action),
            result=SimpleQueryResult,
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def get_membership(self, chat_id: int, *, deadline: Deadline | None = None) -> ChatMember:
        """The bot's own membership in a chat."""
        spec = RequestSpec("GetMembership", HTTPMethod.GET, f"/chats/{chat_id}/members/me", result=ChatMember)
        result: ChatMember = await self.execute(spec, deadline=deadline)
        return result

    async def leave_chat(self, chat_id: int, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        spec = RequestSpec("LeaveChat", HTTPMethod.DELETE, f"/chats/{chat_id}/members/me", result=SimpleQueryResult)
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def pin_message(
        self, chat_id: int, body: PinMessageBody, *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        spec = RequestSpec("PinMessage", HTTPMethod.PUT, f"/chats/{chat_id}/pin", body=body, result=SimpleQueryResult)
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def unpin_message(self, chat_id: int, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        spec = RequestSpec("UnpinMessage", HTTPMethod.DELETE, f"/chats/{chat_id}/pin", result=SimpleQueryResult)
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def get_pinned_message(self, chat_id: int, *, deadline: Deadline | None = None) -> PinnedMessage:
        """Pinned message of a chat; ``message`` is None when nothing is pinned."""
        spec = RequestSpec("GetPinnedMessage", HTTPMethod.GET, f"/chats/{chat_id}/pin", result=PinnedMessage)
        result: PinnedMessage = await self.execute(spec, deadline=deadline)
        return result
