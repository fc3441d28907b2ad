"""Message records and message request bodies."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from maxbot.optional import Opt, OptBool, OptStr, PartialModel
from maxbot.types.attachments import Attachment, AttachmentRequest, decode_attachments
from maxbot.types.base import Record
from maxbot.types.enums import ChatType, MessageLinkType, TextFormat
from maxbot.types.users import User


class Recipient(Record):
    """Chat or user a message was sent to."""

    chat_id: int | None = None
    chat_type: ChatType | None = None
    user_id: int | None = None


class MessageStat(Record):
    views: int = 0


class MarkupElement(Record):
    """Text formatting span inside a message."""

    type: str
    from_: int = Field(default=0, alias="from")
    length: int = 0
    url: str | None = None
    user_link: str | None = None
    user_id: int | None = None


class MessageBody(Record):
    """Content of a message.

    ``attachments`` keeps the raw JSON objects; ``decoded_attachments()``
    turns them into typed attachments.
    """

    mid: str = ""
    seq: int = 0
    text: str | None = None
    attachments: list[dict[str, Any]] | None = None
    markup: list[MarkupElement] | None = None

    def decoded_attachments(self) -> list[Attachment] | None:
        """Typed attachments; unknown attachment types are skipped."""
        return decode_attachments(self.attachments)


class LinkedMessage(Record):
    """Forwarded or replied-to message."""

    type: MessageLinkType
    sender: User | None = None
    chat_id: int | None = None
    message: MessageBody = Field(default_factory=MessageBody)


class Message(Record):
    """A message in a chat."""

    sender: User | None = None
    recipient: Recipient = Field(default_factory=Recipient)
    timestamp: int = 0
    link: LinkedMessage | None = None
    body: MessageBody = Field(default_factory=MessageBody)
    stat: MessageStat | None = None
    url: str | None = None


class MessageList(Record):
    messages: list[Message]


class SendMessageResult(Record):
    message: Message


class NewMessageLink(Record):
    """Reference to another message for replies and forwards."""

    type: MessageLinkType
    mid: str


class NewMessageBody(PartialModel):
    """Body for sending or editing a message.

    When editing, an unset ``text`` keeps the current text while
    ``text=some("")`` clears it.

    ``disable_link_preview`` is sent as a query parameter, not in the JSON.
    """

    text: OptStr = Opt()
    attachments: list[AttachmentRequest] | None = None
    link: NewMessageLink | None = None
    notify: OptBool = Opt()
    format: Opt[TextFormat] = Opt()
    disable_link_preview: bool = Field(default=False, exclude=True)


class Callback(Record):
    """Data received when a user presses an inline button."""

    timestamp: int = 0
    callback_id: str = ""
    payload: str | None = None
    user: User = Field(default_factory=User)


class CallbackAnswer(PartialModel):
    """Answer to a callback: a replacement message and/or a one-off notification."""

    message: NewMessageBody | None = None
    notification: OptStr = Opt()
