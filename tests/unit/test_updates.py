"""Unit tests for update decoding and long polling."""

import json

import httpx
import pytest

from maxbot import BotAPIError, Deadline, ErrorKind, PollDeadlineError, PollOptions, poll_deadline
from maxbot.constants import POLLING_BUFFER_S
from maxbot.types import (
    BotStartedUpdate,
    DialogMutedUpdate,
    MessageCallbackUpdate,
    MessageChatCreatedUpdate,
    MessageCreatedUpdate,
    MessageRemovedUpdate,
    UpdateList,
    decode_update,
    decode_updates,
)

USER = {"user_id": 7, "first_name": "Ann", "is_bot": False, "last_activity_time": 1}

MESSAGE = {
    "sender": USER,
    "recipient": {"chat_id": 100, "chat_type": "dialog"},
    "timestamp": 1700000000000,
    "body": {
        "mid": "mid.1",
        "seq": 1,
        "text": "hello",
        "attachments": [
            {"type": "image", "payload": {"photo_id": 1, "token": "t", "url": "https://img"}},
            {"type": "hologram", "payload": {}},
            {"type": "location", "latitude": 55.75, "longitude": 37.62},
        ],
    },
}


def test_decode_message_created():
    update = decode_update(json.dumps({"update_type": "message_created", "timestamp": 5, "message": MESSAGE}))

    assert isinstance(update, MessageCreatedUpdate)
    assert update.timestamp == 5
    assert update.message.body.text == "hello"
    attachments = update.message.body.decoded_attachments()
    assert [a.type for a in attachments] == ["image", "location"]


def test_decode_callback_without_message():
    update = decode_update(
        {
            "update_type": "message_callback",
            "timestamp": 1,
            "callback": {"timestamp": 1, "callback_id": "cb1", "payload": "yes", "user": USER},
        }
    )

    assert isinstance(update, MessageCallbackUpdate)
    assert update.callback.payload == "yes"
    assert update.message is None


def test_decode_dialog_and_chat_created_updates():
    updates = decode_updates(
        [
            {"update_type": "dialog_muted", "timestamp": 1, "chat_id": 3, "user": USER, "muted_until": 99},
            {
                "update_type": "message_chat_created",
                "timestamp": 2,
                "chat": {"chat_id": 9, "type": "chat", "status": "active", "title": "Room"},
                "message_id": "mid.9",
            },
        ]
    )

    assert isinstance(updates[0], DialogMutedUpdate)
    assert updates[0].muted_until == 99
    assert isinstance(updates[1], MessageChatCreatedUpdate)
    assert updates[1].chat.title == "Room"


def test_unknown_update_types_are_skipped_in_order():
    update_list = UpdateList.model_validate(
        {
            "updates": [
                {"update_type": "bot_started", "timestamp": 1, "chat_id": 1, "user": USER, "payload": "ref"},
                {"update_type": "something_new", "timestamp": 2},
                {"update_type": "bot_started", "timestamp": 3, "chat_id": 2, "user": USER},
            ],
            "marker": 12,
        }
    )

    decoded = update_list.decoded()

    assert [u.timestamp for u in decoded] == [1, 3]
    assert all(isinstance(u, BotStartedUpdate) for u in decoded)
    assert decoded[0].payload == "ref"


def test_updates_with_missing_fields_decode_to_zero_values():
    updates = decode_updates(
        [
            {"update_type": "bot_started", "timestamp": 1, "chat_id": 1, "user": USER},
            {"update_type": "message_removed", "timestamp": 2, "message_id": "m", "chat_id": 1},
            {"update_type": "message_created", "timestamp": 3, "message": {"body": {"text": "hi"}}},
            {"update_type": "message_callback", "timestamp": 4, "callback": {"payload": "p"}},
        ]
    )

    assert [u.timestamp for u in updates] == [1, 2, 3, 4]
    removed = updates[1]
    assert isinstance(removed, MessageRemovedUpdate)
    assert removed.user_id == 0
    created = updates[2]
    assert created.message.body.mid == ""
    assert created.message.body.text == "hi"
    assert created.message.recipient.chat_id is None
    callback = updates[3]
    assert callback.callback.callback_id == ""
    assert callback.callback.user.user_id == 0


def test_null_update_list_decodes_empty():
    update_list = UpdateList.model_validate_json(b'{"updates": null, "marker": 5}')

    assert update_list.updates is None
    assert update_list.marker == 5
    assert update_list.decoded() == []


@pytest.mark.asyncio
async def test_poll_updates_survives_null_batch(make_client, recorder):
    batches = iter(
        [
            {"updates": None, "marker": 5},
            {"updates": [{"update_type": "message_removed", "timestamp": 2, "message_id": "m"}], "marker": 6},
        ]
    )
    handler = recorder(lambda request: httpx.Response(200, json=next(batches)))
    client = make_client(handler)

    async for update in client.poll_updates(timeout=1):
        assert isinstance(update, MessageRemovedUpdate)
        assert update.chat_id == 0
        break

    assert [r.url.params.get("marker") for r in handler.requests] == [None, "5"]


def test_poll_options_query():
    assert PollOptions().to_query() == {"timeout": 30}
    assert PollOptions(timeout=0, marker=0).to_query() == {"timeout": 30}
    assert PollOptions(limit=10, timeout=5, marker=42, types=("message_created", "bot_started")).to_query() == {
        "limit": 10,
        "timeout": 5,
        "marker": 42,
        "types": "message_created,bot_started",
    }


def test_poll_deadline_without_caller_deadline_covers_window():
    deadline = poll_deadline(30, None)

    assert 30 < deadline.remaining() <= 30 + POLLING_BUFFER_S


def test_poll_deadline_keeps_long_enough_caller_deadline():
    caller = Deadline.after(60)

    assert poll_deadline(30, caller) is caller


def test_poll_deadline_rejects_short_caller_deadline():
    with pytest.raises(PollDeadlineError) as exc_info:
        poll_deadline(30, Deadline.after(1))

    assert exc_info.value.required == 30 + POLLING_BUFFER_S


@pytest.mark.asyncio
async def test_get_updates_with_short_deadline_sends_nothing(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"updates": [], "marker": 1}))
    client = make_client(handler)

    with pytest.raises(PollDeadlineError):
        await client.get_updates(timeout=30, deadline=Deadline.after(1))

    assert handler.requests == []


@pytest.mark.asyncio
async def test_get_updates_query(make_client, recorder):
    handler = recorder(httpx.Response(200, json={"updates": [], "marker": 77}))
    client = make_client(handler)

    result = await client.get_updates(limit=5, timeout=1, marker=10, types=["message_created"])

    assert result.marker == 77
    assert handler.last.url.path == "/updates"
    assert dict(handler.last.url.params) == {
        "limit": "5",
        "timeout": "1",
        "marker": "10",
        "types": "message_created",
    }


@pytest.mark.asyncio
async def test_poll_updates_advances_marker(make_client, recorder):
    batches = iter(
        [
            {"updates": [{"update_type": "bot_started", "timestamp": 1, "chat_id": 1, "user": USER}], "marker": 5},
            {"updates": [{"update_type": "unknown", "timestamp": 2}], "marker": 6},
            {"updates": [{"update_type": "bot_started", "timestamp": 3, "chat_id": 1, "user": USER}], "marker": 7},
        ]
    )
    handler = recorder(lambda request: httpx.Response(200, json=next(batches)))
    client = make_client(handler)

    received = []
    async for update in client.poll_updates(timeout=1):
        received.append(update)
        if len(received) == 2:
            break

    assert [u.timestamp for u in received] == [1, 3]
    assert [r.url.params.get("marker") for r in handler.requests] == [None, "5", "6"]


@pytest.mark.asyncio
async def test_poll_updates_propagates_errors(make_client, recorder):
    client = make_client(recorder(httpx.Response(500)))

    with pytest.raises(BotAPIError) as exc_info:
        async for _ in client.poll_updates(timeout=1):
            pass

    assert exc_info.value.kind is ErrorKind.API
    assert exc_info.value.op == "GetUpdates"
