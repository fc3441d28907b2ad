"""Subscription, upload and media records."""

from __future__ import annotations

from maxbot.types.base import Record


class Image(Record):
    """A generic image object."""

    url: str


class Subscription(Record):
    """A WebHook subscription."""

    url: str
    time: int = 0
    update_types: list[str] | None = None
    version: str | None = None


class SubscriptionList(Record):
    subscriptions: list[Subscription] = []


class SubscriptionRequestBody(Record):
    """Body of POST /subscriptions."""

    url: str
    secret: str | None = None
    update_types: list[str] | None = None
    version: str | None = None


class UploadEndpoint(Record):
    """Single-use upload URL returned by POST /uploads.

    For video and audio uploads the server issues the attachment token
    together with the URL.
    """

    url: str
    token: str | None = None


class PhotoToken(Record):
    token: str


class PhotoTokens(Record):
    """Result of an image upload, keyed by photo id."""

    photos: dict[str, PhotoToken]


class UploadedInfo(Record):
    """Token received after uploading video, audio or a file."""

    token: str


class PhotoAttachmentPayload(Record):
    photo_id: int = 0
    token: str = ""
    url: str = ""


class VideoUrls(Record):
    """Playback URLs of a video in various resolutions."""

    mp4_1080: str | None = None
    mp4_720: str | None = None
    mp4_480: str | None = None
    mp4_360: str | None = None
    mp4_240: str | None = None
    mp4_144: str | None = None
    hls: str | None = None


class VideoAttachmentDetails(Record):
    """Response of GET /videos/{videoToken}."""

    token: str
    urls: VideoUrls | None = None
    thumbnail: PhotoAttachmentPayload | None = None
    width: int = 0
    height: int = 0
    duration: int = 0
