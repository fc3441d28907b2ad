"""Unit tests for the two-step upload flow."""

import asyncio
import io

import httpx
import pytest

from maxbot import BotAPIError, ErrorKind
from maxbot.types import UploadType

UPLOAD_URL = "https://upload.test/slot/1?sig=abc"


def _route(upload_response: httpx.Response, endpoint: dict | None = None):
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.host == "api.test":
            return httpx.Response(200, json=endpoint or {"url": UPLOAD_URL})
        return upload_response

    return handler, calls


@pytest.mark.asyncio
async def test_upload_photo(make_client):
    handler, calls = _route(httpx.Response(200, json={"photos": {"p1": {"token": "tok-1"}}}))
    client = make_client(handler)

    tokens = await client.upload_photo("cat.jpg", b"\xff\xd8jpeg")

    assert tokens.photos["p1"].token == "tok-1"
    url_request, upload_request = calls
    assert url_request.method == "POST"
    assert url_request.url.path == "/uploads"
    assert url_request.url.params["type"] == "image"
    assert str(upload_request.url) == UPLOAD_URL
    assert "Authorization" not in upload_request.headers
    assert upload_request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="data"; filename="cat.jpg"' in upload_request.content
    assert b"\xff\xd8jpeg" in upload_request.content


@pytest.mark.asyncio
async def test_upload_media_decodes_response(make_client):
    handler, calls = _route(httpx.Response(200, json={"token": "file-token"}))
    client = make_client(handler)

    info = await client.upload_media(UploadType.FILE, "report.pdf", io.BytesIO(b"%PDF"))

    assert info.token == "file-token"
    assert calls[0].url.params["type"] == "file"
    assert b"%PDF" in calls[1].content


@pytest.mark.asyncio
async def test_upload_media_prefers_token_issued_with_url(make_client):
    handler, _ = _route(httpx.Response(200, text="<retval>1</retval>"), {"url": UPLOAD_URL, "token": "video-token"})
    client = make_client(handler)

    info = await client.upload_media(UploadType.VIDEO, "clip.mp4", b"mp4")

    assert info.token == "video-token"


@pytest.mark.asyncio
async def test_upload_rejection_is_api_error(make_client):
    handler, _ = _route(httpx.Response(413, json={"error": "file.too.big"}))
    client = make_client(handler)

    with pytest.raises(BotAPIError) as exc_info:
        await client.upload_photo("big.png", b"png")

    assert exc_info.value.kind is ErrorKind.API
    assert exc_info.value.op == "UploadPhoto"
    assert exc_info.value.status_code == 413
    assert exc_info.value.message == "file.too.big"


@pytest.mark.asyncio
async def test_bad_upload_response_is_decode_error(make_client):
    handler, _ = _route(httpx.Response(200, text="<html/>"))
    client = make_client(handler)

    with pytest.raises(BotAPIError) as exc_info:
        await client.upload_media(UploadType.AUDIO, "a.mp3", b"mp3")

    assert exc_info.value.kind is ErrorKind.DECODE
    assert exc_info.value.op == "UploadMedia"


@pytest.mark.asyncio
async def test_slow_upload_times_out(make_client):
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.test":
            return httpx.Response(200, json={"url": UPLOAD_URL})
        await asyncio.sleep(0.5)
        return httpx.Response(200, json={"token": "t"})

    client = make_client(handler, timeout=0.05)

    with pytest.raises(BotAPIError) as exc_info:
        await client.upload_media(UploadType.FILE, "f.bin", b"bin")

    assert exc_info.value.is_timeout


@pytest.mark.asyncio
async def test_get_video_details(make_client, recorder):
    handler = recorder(
        httpx.Response(200, json={"token": "abc-123", "urls": {"mp4_720": "https://v/720"}, "duration": 12})
    )
    client = make_client(handler)

    details = await client.get_video_details("abc-123")

    assert details.urls.mp4_720 == "https://v/720"
    assert details.duration == 12
    assert handler.last.url.path == "/videos/abc-123"
