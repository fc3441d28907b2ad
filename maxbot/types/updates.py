"""Update events delivered by long polling or webhooks.

Every update is a JSON object tagged by ``update_type``. ``GET /updates``
returns them untyped (``UpdateList.updates``); ``decode_updates`` or
``UpdateList.decoded()`` turn them into the variants below. Updates of a type
this client does not know are skipped.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, TypeAlias

from pydantic import Field

from maxbot.decoder import RawPayload, VariantDecoder
from maxbot.types.base import Record
from maxbot.types.chats import Chat
from maxbot.types.messages import Callback, Message
from maxbot.types.users import User


class MessageCreatedUpdate(Record):
    update_type: Literal["message_created"]
    timestamp: int = 0
    message: Message = Field(default_factory=Message)
    user_locale: str | None = None


class MessageCallbackUpdate(Record):
    """A user pressed an inline button."""

    update_type: Literal["message_callback"]
    timestamp: int = 0
    callback: Callback = Field(default_factory=Callback)
    message: Message | None = None
    user_locale: str | None = None


class MessageEditedUpdate(Record):
    update_type: Literal["message_edited"]
    timestamp: int = 0
    message: Message = Field(default_factory=Message)


class MessageRemovedUpdate(Record):
    update_type: Literal["message_removed"]
    timestamp: int = 0
    message_id: str = ""
    chat_id: int = 0
    user_id: int = 0


class BotStartedUpdate(Record):
    """A user pressed the Start button."""

    update_type: Literal["bot_started"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    payload: str | None = None
    user_locale: str | None = None


class BotStoppedUpdate(Record):
    """A user stopped the bot."""

    update_type: Literal["bot_stopped"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    user_locale: str | None = None


class BotAddedUpdate(Record):
    update_type: Literal["bot_added"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    is_channel: bool = False


class BotRemovedUpdate(Record):
    update_type: Literal["bot_removed"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    is_channel: bool = False


class UserAddedUpdate(Record):
    update_type: Literal["user_added"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    inviter_id: int | None = None
    is_channel: bool = False


class UserRemovedUpdate(Record):
    update_type: Literal["user_removed"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    admin_id: int | None = None
    is_channel: bool = False


class ChatTitleChangedUpdate(Record):
    update_type: Literal["chat_title_changed"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    title: str = ""


class MessageChatCreatedUpdate(Record):
    """A chat was created through a chat button."""

    update_type: Literal["message_chat_created"]
    timestamp: int = 0
    chat: Chat
    message_id: str = ""
    start_payload: str | None = None


class DialogMutedUpdate(Record):
    update_type: Literal["dialog_muted"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    muted_until: int | None = None
    user_locale: str | None = None


class DialogUnmutedUpdate(Record):
    update_type: Literal["dialog_unmuted"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    user_locale: str | None = None


class DialogClearedUpdate(Record):
    update_type: Literal["dialog_cleared"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    user_locale: str | None = None


class DialogRemovedUpdate(Record):
    update_type: Literal["dialog_removed"]
    timestamp: int = 0
    chat_id: int = 0
    user: User = Field(default_factory=User)
    user_locale: str | None = None


Update: TypeAlias = (
    MessageCreatedUpdate
    | MessageCallbackUpdate
    | MessageEditedUpdate
    | MessageRemovedUpdate
    | BotStartedUpdate
    | BotStoppedUpdate
    | BotAddedUpdate
    | BotRemovedUpdate
    | UserAddedUpdate
    | UserRemovedUpdate
    | ChatTitleChangedUpdate
    | MessageChatCreatedUpdate
    | DialogMutedUpdate
    | DialogUnmutedUpdate
    | DialogClearedUpdate
    | DialogRemovedUpdate
)

UPDATE_DECODER: VariantDecoder[Update] = VariantDecoder(
    "update_type",
    (
        MessageCreatedUpdate,
        MessageCallbackUpdate,
        MessageEditedUpdate,
        MessageRemovedUpdate,
        BotStartedUpdate,
        BotStoppedUpdate,
        BotAddedUpdate,
        BotRemovedUpdate,
        UserAddedUpdate,
        UserRemovedUpdate,
        ChatTitleChangedUpdate,
        MessageChatCreatedUpdate,
        DialogMutedUpdate,
        DialogUnmutedUpdate,
        DialogClearedUpdate,
        DialogRemovedUpdate,
    ),
    operation="DecodeUpdates",
)


def decode_updates(blobs: Sequence[RawPayload] | None) -> list[Update] | None:
    """Decode raw update objects in order, skipping unknown update types."""
    return UPDATE_DECODER.decode_all(blobs)


def decode_update(blob: RawPayload) -> Update | None:
    """Decode a single update, e.g. a webhook request body. None if the type is unknown."""
    return UPDATE_DECODER.decode(blob)


class UpdateList(Record):
    """Response of GET /updates: raw updates plus the next marker."""

    updates: list[dict[str, Any]] | None = None
    marker: int | None = None

    def decoded(self) -> list[Update]:
        return UPDATE_DECODER.decode_all(self.updates) or []
