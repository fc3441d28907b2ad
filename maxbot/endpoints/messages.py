"""Message and callback endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPMethod
from urllib.parse import quote

from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, QueryValue, RequestSpec
from maxbot.types.base import SimpleQueryResult
from maxbot.types.messages import CallbackAnswer, Message, MessageList, NewMessageBody, SendMessageResult


class MessagesMixin(BaseClient):
    async def send_message(
        self, chat_id: int, body: NewMessageBody, *, deadline: Deadline | None = None
    ) -> Message:
        """Send a message to a chat (POST /messages).

        Set ``body.disable_link_preview`` to stop the server from generating link previews.
        """
        query: dict[str, QueryValue] = {}
        if chat_id != 0:
            query["chat_id"] = chat_id
        return await self._post_message("SendMessage", query, body, deadline)

    async def send_message_to_user(
        self, user_id: int, body: NewMessageBody, *, deadline: Deadline | None = None
    ) -> Message:
        """Send a message directly to a user."""
        return await self._post_message("SendMessageToUser", {"user_id": user_id}, body, deadline)

    async def _post_message(
        self,
        op: str,
        query: dict[str, QueryValue],
        body: NewMessageBody,
        deadline: Deadline | None,
    ) -> Message:
        if body.disable_link_preview:
            query["disable_link_preview"] = "true"
        spec = RequestSpec(op, HTTPMethod.POST, "/messages", query=query, body=body, result=SendMessageResult)
        result: SendMessageResult = await self.execute(spec, deadline=deadline)
        return result.message

    async def edit_message(
        self, message_id: str, body: NewMessageBody, *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        """Edit a message. Unset ``text`` keeps the text, ``some("")`` clears it."""
        spec = RequestSpec(
            "EditMessage",
            HTTPMethod.PUT,
            "/messages",
            query={"message_id": message_id},
            body=body,
            result=SimpleQueryResult,
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def delete_message(self, message_id: str, *, deadline: Deadline | None = None) -> SimpleQueryResult:
        spec = RequestSpec(
            "DeleteMessage", HTTPMethod.DELETE, "/messages", query={"message_id": message_id}, result=SimpleQueryResult
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result

    async def get_messages(
        self,
        chat_id: int = 0,
        count: int = 0,
        message_ids: Sequence[str] | None = None,
        from_ts: int = 0,
        to_ts: int = 0,
        *,
        deadline: Deadline | None = None,
    ) -> MessageList:
        """Messages of a chat, newest first.

        Args:
            chat_id: Chat to read; required unless ``message_ids`` is given
            count: Number of messages, 0 for the server default
            message_ids: Fetch exactly these messages
            from_ts: Start timestamp (inclusive); greater than ``to_ts``
            to_ts: End timestamp (inclusive)
        """
        query: dict[str, QueryValue] = {}
        if chat_id != 0:
            query["chat_id"] = chat_id
        if count > 0:
            query["count"] = count
        if message_ids:
            query["message_ids"] = ",".join(message_ids)
        if from_ts != 0:
            query["from"] = from_ts
        if to_ts != 0:
            query["to"] = to_ts
        spec = RequestSpec("GetMessages", HTTPMethod.GET, "/messages", query=query, result=MessageList)
        result: MessageList = await self.execute(spec, deadline=deadline)
        return result

    async def get_message_by_id(self, message_id: str, *, deadline: Deadline | None = None) -> Message:
        spec = RequestSpec("GetMessageByID", HTTPMethod.GET, f"/messages/{quote(message_id, safe='')}", result=Message)
        result: Message = await self.execute(spec, deadline=deadline)
        return result

    async def answer_callback(
        self, callback_id: str, answer: CallbackAnswer, *, deadline: Deadline | None = None
    ) -> SimpleQueryResult:
        """Respond to an inline button press."""
        spec = RequestSpec(
            "AnswerCallback",
            HTTPMethod.POST,
            "/answers",
            query={"callback_id": callback_id},
            body=answer,
            result=SimpleQueryResult,
        )
        result: SimpleQueryResult = await self.execute(spec, deadline=deadline)
        return result
