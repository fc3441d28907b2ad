"""Chats, members and admins."""

from __future__ import annotations

from typing import ClassVar

from maxbot.optional import Opt, OptBool, OptStr, PartialModel
from maxbot.types.attachments import PhotoAttachmentRequestPayload
from maxbot.types.base import Composed, Record
from maxbot.types.common import Image
from maxbot.types.enums import ChatAdminPermission, ChatStatus, ChatType, SenderAction
from maxbot.types.messages import Message
from maxbot.types.users import UserWithPhoto


class Chat(Record):
    """A Max chat."""

    chat_id: int
    type: ChatType
    status: ChatStatus
    title: str | None = None
    icon: Image | None = None
    last_event_time: int = 0
    participants_count: int = 0
    owner_id: int | None = None
    participants: dict[str, int] | None = None
    is_public: bool = False
    link: str | None = None
    description: str | None = None
    dialog_with_user: UserWithPhoto | None = None
    messages_count: int | None = None
    chat_message_id: str | None = None
    pinned_message: Message | None = None


class ChatList(Record):
    """Page of chats; ``marker`` is None on the last page."""

    chats: list[Chat]
    marker: int | None = None


class ChatPatch(PartialModel):
    """Body of PATCH /chats/{chatId}. Only set fields are changed."""

    icon: PhotoAttachmentRequestPayload | None = None
    title: OptStr = Opt()
    pin: OptStr = Opt()
    notify: OptBool = Opt()


class ChatMember(Composed):
    """Member of a chat."""

    embedded_field: ClassVar[str] = "profile"

    profile: UserWithPhoto
    last_access_time: int = 0
    is_owner: bool = False
    is_admin: bool = False
    join_time: int = 0
    permissions: list[ChatAdminPermission] | None = None
    alias: str | None = None


class ChatMembersList(Record):
    members: list[ChatMember]
    marker: int | None = None


class ChatAdmin(Record):
    """Administrator and the permissions granted to them."""

    user_id: int
    permissions: list[ChatAdminPermission]
    alias: str | None = None


class ChatAdminsList(Record):
    admins: list[ChatAdmin]


class UserIdsList(Record):
    user_ids: list[int]


class ActionRequestBody(Record):
    action: SenderAction


class PinMessageBody(PartialModel):
    message_id: str
    notify: OptBool = Opt()


class PinnedMessage(Record):
    """Response of GET /chats/{chatId}/pin; ``message`` is None when nothing is pinned."""

    message: Message | None = None
