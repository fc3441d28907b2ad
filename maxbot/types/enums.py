"""Enumerations used by the Max Bot API."""

from enum import Enum


class ChatType(str, Enum):
    """Type of chat."""

    DIALOG = "dialog"
    CHAT = "chat"
    CHANNEL = "channel"


class ChatStatus(str, Enum):
    """The bot's status in a chat."""

    ACTIVE = "active"
    REMOVED = "removed"
    LEFT = "left"
    CLOSED = "closed"
    SUSPENDED = "suspended"


class SenderAction(str, Enum):
    """Action shown to chat members while the bot works."""

    TYPING_ON = "typing_on"
    SENDING_PHOTO = "sending_photo"
    SENDING_VIDEO = "sending_video"
    SENDING_AUDIO = "sending_audio"
    SENDING_FILE = "sending_file"
    MARK_SEEN = "mark_seen"


class UploadType(str, Enum):
    """Media category selected when requesting an upload URL."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"


class Intent(str, Enum):
    """Visual intent of a button."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    DEFAULT = "default"


class MessageLinkType(str, Enum):
    FORWARD = "forward"
    REPLY = "reply"


class TextFormat(str, Enum):
    MARKDOWN = "markdown"
    HTML = "html"


class UpdateType(str, Enum):
    """Type of an update event."""

    MESSAGE_CREATED = "message_created"
    MESSAGE_CALLBACK = "message_callback"
    MESSAGE_EDITED = "message_edited"
    MESSAGE_REMOVED = "message_removed"
    BOT_STARTED = "bot_started"
    BOT_STOPPED = "bot_stopped"
    BOT_ADDED = "bot_added"
    BOT_REMOVED = "bot_removed"
    USER_ADDED = "user_added"
    USER_REMOVED = "user_removed"
    CHAT_TITLE_CHANGED = "chat_title_changed"
    MESSAGE_CHAT_CREATED = "message_chat_created"
    DIALOG_MUTED = "dialog_muted"
    DIALOG_UNMUTED = "dialog_unmuted"
    DIALOG_CLEARED = "dialog_cleared"
    DIALOG_REMOVED = "dialog_removed"


class ChatAdminPermission(str, Enum):
    """Permission granted to a chat admin."""

    READ_ALL_MESSAGES = "read_all_messages"
    ADD_REMOVE_MEMBERS = "add_remove_members"
    ADD_ADMINS = "add_admins"
    CHANGE_CHAT_INFO = "change_chat_info"
    PIN_MESSAGE = "pin_message"
    WRITE = "write"
