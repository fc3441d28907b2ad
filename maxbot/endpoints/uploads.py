"""Upload and media endpoints.

Uploading is two steps: ``get_upload_url`` issues a single-use URL, then the
file is POSTed there as multipart form data.
"""

from __future__ import annotations

from http import HTTPMethod
from urllib.parse import quote

from pydantic import ValidationError

from maxbot.codec import decode_json
from maxbot.deadline import Deadline
from maxbot.dispatch import BaseClient, RequestSpec, UploadData
from maxbot.errors import BotAPIError
from maxbot.types.common import PhotoTokens, UploadedInfo, UploadEndpoint, VideoAttachmentDetails
from maxbot.types.enums import UploadType


class UploadsMixin(BaseClient):
    async def get_video_details(self, token: str, *, deadline: Deadline | None = None) -> VideoAttachmentDetails:
        spec = RequestSpec(
            "GetVideoDetails", HTTPMethod.GET, f"/videos/{quote(token, safe='')}", result=VideoAttachmentDetails
        )
        result: VideoAttachmentDetails = await self.execute(spec, deadline=deadline)
        return result

    async def get_upload_url(self, upload_type: UploadType, *, deadline: Deadline | None = None) -> UploadEndpoint:
        spec = RequestSpec(
            "GetUploadURL",
            HTTPMethod.POST,
            "/uploads",
            query={"type": UploadType(upload_type).value},
            result=UploadEndpoint,
        )
        result: UploadEndpoint = await self.execute(spec, deadline=deadline)
        return result

    async def upload_photo(self, filename: str, data: UploadData, *, deadline: Deadline | None = None) -> PhotoTokens:
        """Upload an image; attach it with ``AttachmentRequest.photo(PhotoAttachmentRequestPayload(photos=...))``."""
        endpoint = await self.get_upload_url(UploadType.IMAGE, deadline=deadline)
        raw = await self.upload("UploadPhoto", endpoint.url, filename, data, deadline=deadline)
        try:
            result: PhotoTokens = decode_json(raw, PhotoTokens)
        except ValidationError as e:
            raise BotAPIError.decode("UploadPhoto", e) from e
        return result

    async def upload_media(
        self,
        upload_type: UploadType,
        filename: str,
        data: UploadData,
        *,
        deadline: Deadline | None = None,
    ) -> UploadedInfo:
        """Upload a video, audio or file and return its attachment token.

        Video and audio tokens are issued together with the upload URL. When
        one came with it, that token is returned and the upload response body
        is ignored, so a malformed body is not an error. Otherwise the upload
        response is decoded as ``UploadedInfo``.
        """
        endpoint = await self.get_upload_url(upload_type, deadline=deadline)
        raw = await self.upload("UploadMedia", endpoint.url, filename, data, deadline=deadline)
        if endpoint.token:
            return UploadedInfo(token=endpoint.token)
        try:
            result: UploadedInfo = decode_json(raw, UploadedInfo)
        except ValidationError as e:
            raise BotAPIError.decode("UploadMedia", e) from e
        return result
