"""API data models."""

from maxbot.types.attachments import (
    ATTACHMENT_DECODER,
    Attachment,
    AttachmentRequest,
    AudioAttachment,
    Button,
    ContactAttachment,
    ContactAttachmentPayload,
    ContactAttachmentRequestPayload,
    DataAttachment,
    FileAttachment,
    FileAttachmentPayload,
    InlineKeyboardAttachment,
    Keyboard,
    LocationAttachment,
    MediaAttachmentPayload,
    PhotoAttachment,
    PhotoAttachmentRequestPayload,
    ReplyButton,
    ReplyKeyboardAttachment,
    ShareAttachment,
    ShareAttachmentPayload,
    StickerAttachment,
    StickerAttachmentPayload,
    StickerAttachmentRequestPayload,
    VideoAttachment,
    VideoThumbnail,
    decode_attachments,
)
from maxbot.types.base import Composed, Record, SimpleQueryResult
from maxbot.types.bots import BotCommand, BotInfo, BotPatch
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
from maxbot.types.common import (
    Image,
    PhotoAttachmentPayload,
    PhotoToken,
    PhotoTokens,
    Subscription,
    SubscriptionList,
    SubscriptionRequestBody,
    UploadedInfo,
    UploadEndpoint,
    VideoAttachmentDetails,
    VideoUrls,
)
from maxbot.types.enums import (
    ChatAdminPermission,
    ChatStatus,
    ChatType,
    Intent,
    MessageLinkType,
    SenderAction,
    TextFormat,
    UpdateType,
    UploadType,
)
from maxbot.types.messages import (
    Callback,
    CallbackAnswer,
    LinkedMessage,
    MarkupElement,
    Message,
    MessageBody,
    MessageList,
    MessageStat,
    NewMessageBody,
    NewMessageLink,
    Recipient,
    SendMessageResult,
)
from maxbot.types.updates import (
    UPDATE_DECODER,
    BotAddedUpdate,
    BotRemovedUpdate,
    BotStartedUpdate,
    BotStoppedUpdate,
    ChatTitleChangedUpdate,
    DialogClearedUpdate,
    DialogMutedUpdate,
    DialogRemovedUpdate,
    DialogUnmutedUpdate,
    MessageCallbackUpdate,
    MessageChatCreatedUpdate,
    MessageCreatedUpdate,
    MessageEditedUpdate,
    MessageRemovedUpdate,
    Update,
    UpdateList,
    UserAddedUpdate,
    UserRemovedUpdate,
    decode_update,
    decode_updates,
)
from maxbot.types.users import User, UserWithPhoto

__all__ = [
    "ATTACHMENT_DECODER",
    "UPDATE_DECODER",
    "ActionRequestBody",
    "Attachment",
    "AttachmentRequest",
    "AudioAttachment",
    "BotAddedUpdate",
    "BotCommand",
    "BotInfo",
    "BotPatch",
    "BotRemovedUpdate",
    "BotStartedUpdate",
    "BotStoppedUpdate",
    "Button",
    "Callback",
    "CallbackAnswer",
    "Chat",
    "ChatAdmin",
    "ChatAdminPermission",
    "ChatAdminsList",
    "ChatList",
    "ChatMember",
    "ChatMembersList",
    "ChatPatch",
    "ChatStatus",
    "ChatTitleChangedUpdate",
    "ChatType",
    "Composed",
    "ContactAttachment",
    "ContactAttachmentPayload",
    "ContactAttachmentRequestPayload",
    "DataAttachment",
    "DialogClearedUpdate",
    "DialogMutedUpdate",
    "DialogRemovedUpdate",
    "DialogUnmutedUpdate",
    "FileAttachment",
    "FileAttachmentPayload",
    "Image",
    "InlineKeyboardAttachment",
    "Intent",
    "Keyboard",
    "LinkedMessage",
    "LocationAttachment",
    "MarkupElement",
    "MediaAttachmentPayload",
    "Message",
    "MessageBody",
    "MessageCallbackUpdate",
    "MessageChatCreatedUpdate",
    "MessageCreatedUpdate",
    "MessageEditedUpdate",
    "MessageLinkType",
    "MessageList",
    "MessageRemovedUpdate",
    "MessageStat",
    "NewMessageBody",
    "NewMessageLink",
    "PhotoAttachment",
    "PhotoAttachmentPayload",
    "PhotoAttachmentRequestPayload",
    "PhotoToken",
    "PhotoTokens",
    "PinMessageBody",
    "PinnedMessage",
    "Recipient",
    "Record",
    "ReplyButton",
    "ReplyKeyboardAttachment",
    "SendMessageResult",
    "SenderAction",
    "ShareAttachment",
    "ShareAttachmentPayload",
    "SimpleQueryResult",
    "StickerAttachment",
    "StickerAttachmentPayload",
    "StickerAttachmentRequestPayload",
    "Subscription",
    "SubscriptionList",
    "SubscriptionRequestBody",
    "TextFormat",
    "Update",
    "UpdateList",
    "UpdateType",
    "UploadEndpoint",
    "UploadType",
    "UploadedInfo",
    "User",
    "UserAddedUpdate",
    "UserIdsList",
    "UserRemovedUpdate",
    "UserWithPhoto",
    "VideoAttachment",
    "VideoAttachmentDetails",
    "VideoThumbnail",
    "VideoUrls",
    "decode_attachments",
    "decode_update",
    "decode_updates",
]
