"""Message attachments: inbound variants and outbound requests.

Inbound attachments are tagged by their ``type`` field and decoded through
``ATTACHMENT_DECODER``. Outbound attachments are built with the
``AttachmentRequest`` constructors, e.g. ``AttachmentRequest.location(55.75, 37.62)``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal, TypeAlias

from maxbot.decoder import RawPayload, VariantDecoder
from maxbot.optional import Opt, OptInt, OptStr, PartialModel
from maxbot.types.base import Record
from maxbot.types.common import PhotoAttachmentPayload, PhotoToken, UploadedInfo
from maxbot.types.enums import Intent
from maxbot.types.users import User

# --- Keyboards ---


class Button(PartialModel):
    """Button of an inline keyboard.

    ``type`` is one of "callback", "link", "request_contact",
    "request_geo_location", "chat", "message".
    """

    type: str
    text: str
    payload: str | None = None
    url: str | None = None
    intent: Intent | None = None
    quick: bool | None = None
    chat_title: str | None = None
    chat_description: OptStr = Opt()
    start_payload: OptStr = Opt()
    uuid: OptInt = Opt()


class ReplyButton(Record):
    """Button of a reply keyboard."""

    type: str | None = None
    text: str
    payload: str | None = None
    intent: Intent | None = None
    quick: bool | None = None


class Keyboard(Record):
    """Two-dimensional grid of buttons."""

    buttons: list[list[Button]]


# --- Inbound payloads ---


class MediaAttachmentPayload(Record):
    url: str = ""
    token: str = ""


class VideoThumbnail(Record):
    url: str


class FileAttachmentPayload(Record):
    url: str = ""
    token: str = ""


class StickerAttachmentPayload(Record):
    url: str = ""
    code: str = ""


class ContactAttachmentPayload(Record):
    vcf_info: str | None = None
    max_info: User | None = None


class ShareAttachmentPayload(Record):
    url: str | None = None
    token: str | None = None


# --- Inbound variants ---


class PhotoAttachment(Record):
    type: Literal["image"]
    payload: PhotoAttachmentPayload


class VideoAttachment(Record):
    type: Literal["video"]
    payload: MediaAttachmentPayload
    thumbnail: VideoThumbnail | None = None
    width: int | None = None
    height: int | None = None
    duration: int | None = None


class AudioAttachment(Record):
    type: Literal["audio"]
    payload: MediaAttachmentPayload
    transcription: str | None = None


class FileAttachment(Record):
    type: Literal["file"]
    payload: FileAttachmentPayload
    filename: str = ""
    size: int = 0


class StickerAttachment(Record):
    type: Literal["sticker"]
    payload: StickerAttachmentPayload
    width: int = 0
    height: int = 0


class ContactAttachment(Record):
    type: Literal["contact"]
    payload: ContactAttachmentPayload


class ShareAttachment(Record):
    """Link preview attached to a message."""

    type: Literal["share"]
    payload: ShareAttachmentPayload
    title: str | None = None
    description: str | None = None
    image_url: str | None = None


class LocationAttachment(Record):
    type: Literal["location"]
    latitude: float
    longitude: float


class InlineKeyboardAttachment(Record):
    type: Literal["inline_keyboard"]
    payload: Keyboard


class ReplyKeyboardAttachment(Record):
    type: Literal["reply_keyboard"]
    buttons: list[list[ReplyButton]]


class DataAttachment(Record):
    """Payload sent through a message button."""

    type: Literal["data"]
    data: str


Attachment: TypeAlias = (
    PhotoAttachment
    | VideoAttachment
    | AudioAttachment
    | FileAttachment
    | StickerAttachment
    | ContactAttachment
    | ShareAttachment
    | LocationAttachment
    | InlineKeyboardAttachment
    | ReplyKeyboardAttachment
    | DataAttachment
)

ATTACHMENT_DECODER: VariantDecoder[Attachment] = VariantDecoder(
    "type",
    (
        PhotoAttachment,
        VideoAttachment,
        AudioAttachment,
        FileAttachment,
        StickerAttachment,
        ContactAttachment,
        ShareAttachment,
        LocationAttachment,
        InlineKeyboardAttachment,
        ReplyKeyboardAttachment,
        DataAttachment,
    ),
    operation="DecodeAttachments",
)


def decode_attachments(blobs: Sequence[RawPayload] | None) -> list[Attachment] | None:
    """Decode raw attachment objects, skipping unknown types."""
    return ATTACHMENT_DECODER.decode_all(blobs)


# --- Outbound requests ---


class PhotoAttachmentRequestPayload(Record):
    """Image to attach. Set exactly one of the fields."""

    url: str | None = None
    token: str | None = None
    photos: dict[str, PhotoToken] | None = None


class StickerAttachmentRequestPayload(Record):
    code: str


class ContactAttachmentRequestPayload(Record):
    name: str | None = None
    contact_id: int | None = None
    vcf_info: str | None = None
    vcf_phone: str | None = None


class AttachmentRequest(Record):
    """Attachment sent with a new or edited message."""

    type: str
    payload: Any = None
    latitude: float | None = None
    longitude: float | None = None
    buttons: list[list[ReplyButton]] | None = None
    direct: bool | None = None
    direct_user_id: int | None = None

    @classmethod
    def photo(cls, payload: PhotoAttachmentRequestPayload) -> AttachmentRequest:
        return cls(type="image", payload=payload)

    @classmethod
    def video(cls, payload: UploadedInfo) -> AttachmentRequest:
        return cls(type="video", payload=payload)

    @classmethod
    def audio(cls, payload: UploadedInfo) -> AttachmentRequest:
        return cls(type="audio", payload=payload)

    @classmethod
    def file(cls, payload: UploadedInfo) -> AttachmentRequest:
        return cls(type="file", payload=payload)

    @classmethod
    def sticker(cls, payload: StickerAttachmentRequestPayload) -> AttachmentRequest:
        return cls(type="sticker", payload=payload)

    @classmethod
    def contact(cls, payload: ContactAttachmentRequestPayload) -> AttachmentRequest:
        return cls(type="contact", payload=payload)

    @classmethod
    def share(cls, payload: ShareAttachmentPayload) -> AttachmentRequest:
        return cls(type="share", payload=payload)

    @classmethod
    def inline_keyboard(cls, buttons: list[list[Button]]) -> AttachmentRequest:
        return cls(type="inline_keyboard", payload=Keyboard(buttons=buttons))

    @classmethod
    def reply_keyboard(
        cls,
        buttons: list[list[ReplyButton]],
        *,
        direct: bool = False,
        direct_user_id: int | None = None,
    ) -> AttachmentRequest:
        return cls(type="reply_keyboard", buttons=buttons, direct=direct or None, direct_user_id=direct_user_id)

    @classmethod
    def location(cls, latitude: float, longitude: float) -> AttachmentRequest:
        return cls(type="location", latitude=latitude, longitude=longitude)
