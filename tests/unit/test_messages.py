"""Unit tests for message endpoints."""

import json

import httpx
import pytest

from maxbot import Opt, some
from maxbot.types import CallbackAnswer, MessageLinkType, NewMessageBody, NewMessageLink

MESSAGE = {
    "sender": {"user_id": 1, "first_name": "Bot", "is_bot": True},
    "recipient": {"chat_id": 100, "chat_type": "chat"},
    "timestamp": 1,
    "body": {"mid": "mid.1", "seq": 1, "text": "hi"},
}
OK = {"success": True}


@pytest.mark.asyncio
async def test_send_message(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"message": MESSAGE}))
    client = make_client(handler)

    message = await client.send_message(100, NewMessageBody(text=some("hi")))

    assert message.body.mid == "mid.1"
    assert handler.last.method == "POST"
    assert handler.last.url.path == "/messages"
    assert dict(handler.last.url.params) == {"chat_id": "100"}
    assert json.loads(handler.last.content) == {"text": "hi"}


@pytest.mark.asyncio
async def test_disable_link_preview_goes_to_query(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"message": MESSAGE}))
    client = make_client(handler)

    await client.send_message_to_user(7, NewMessageBody(text=some("https://x"), disable_link_preview=True))

    assert dict(handler.last.url.params) == {"user_id": "7", "disable_link_preview": "true"}
    assert json.loads(handler.last.content) == {"text": "https://x"}


@pytest.mark.asyncio
async def test_reply_link(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"message": MESSAGE}))
    client = make_client(handler)

    await client.send_message(
        100, NewMessageBody(text=some("ok"), link=NewMessageLink(type=MessageLinkType.REPLY, mid="mid.0"))
    )

    assert json.loads(handler.last.content) == {"text": "ok", "link": {"type": "reply", "mid": "mid.0"}}


@pytest.mark.asyncio
async def test_edit_message_can_clear_text(make_client, recorder):
    handler = recorder(httpx.Response(200, json=OK))
    client = make_client(handler)

    result = await client.edit_message("mid.1", NewMessageBody(text=some("")))

    assert result.success is True
    assert handler.last.method == "PUT"
    assert dict(handler.last.url.params) == {"message_id": "mid.1"}
    assert json.loads(handler.last.content) == {"text": ""}


@pytest.mark.asyncio
async def test_edit_message_keeps_text_when_unset(make_client, recorder):
    handler = recorder(httpx.Response(200, json=OK))
    client = make_client(handler)

    await client.edit_message("mid.1", NewMessageBody(text=Opt(), notify=some(False)))

    assert json.loads(handler.last.content) == {"notify": False}


@pytest.mark.asyncio
async def test_delete_message(make_client, recorder):
    handler = recorder(httpx.Response(200, json=OK))
    client = make_client(handler)

    await client.delete_message("mid.1")

    assert handler.last.method == "DELETE"
    assert dict(handler.last.url.params) == {"message_id": "mid.1"}


@pytest.mark.asyncio
async def test_get_messages_query(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"messages": [MESSAGE]}))
    client = make_client(handler)

    result = await client.get_messages(chat_id=100, count=5, message_ids=["a", "b"], from_ts=20, to_ts=10)

    assert len(result.messages) == 1
    assert dict(handler.last.url.params) == {
        "chat_id": "100",
        "count": "5",
        "message_ids": "a,b",
        "from": "20",
        "to": "10",
    }


@pytest.mark.asyncio
async def test_get_message_by_id(make_client, recorder):
    handler = recorder(httpx.Response(200, json=MESSAGE))
    client = make_client(handler)

    message = await client.get_message_by_id("mid-99")

    assert message.body.text == "hi"
    assert handler.last.url.path == "/messages/mid-99"


@pytest.mark.asyncio
async def test_answer_callback(make_client, recorder):
    handler = recorder(httpx.Response(200, json=OK))
    client = make_client(handler)

    await client.answer_callback("cb.1", CallbackAnswer(notification=some("Done")))

    assert handler.last.url.path == "/answers"
    assert dict(handler.last.url.params) == {"callback_id": "cb.1"}
    assert json.loads(handler.last.content) == {"notification": "Done"}
