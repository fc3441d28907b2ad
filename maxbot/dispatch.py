"""Request/response dispatch shared by every API operation.

``BaseClient.execute`` turns a ``RequestSpec`` into exactly one HTTP round
trip and maps every failure onto a ``BotAPIError``. Endpoint mixins build the
``RequestSpec`` and return the decoded result.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPMethod, HTTPStatus
from typing import IO, Any, TypeAlias

import httpx
from pydantic import BaseModel, PydanticUserError, ValidationError
from pydantic_core import PydanticSerializationError
from structlog import get_logger

from maxbot.codec import decode_json, encode_json
from maxbot.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, UPLOAD_FIELD_NAME
from maxbot.deadline import Deadline
from maxbot.errors import BotAPIError, EmptyTokenError

logger = get_logger(__name__)

QueryValue: TypeAlias = str | int | bool
UploadData: TypeAlias = bytes | IO[bytes]

__all__ = ["BaseClient", "RequestSpec"]


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to perform one API call."""

    operation: str
    method: HTTPMethod
    path: str
    query: Mapping[str, QueryValue] | None = None
    body: Any = None
    result: Any = None


class ErrorBody(BaseModel):  # type: ignore[explicit-any]
    """Error object returned with non-200 responses."""

    error: str | None = None
    code: str | int | None = None
    message: str | None = None


class BaseClient:
    """Holds the connection settings and performs classified HTTP calls.

    Args:
        token: Bot access token, sent verbatim in the ``Authorization`` header
        base_url: API root
        timeout: Per-call bound (seconds) used when a call gets no deadline; 0 disables it
        http_client: Shared ``httpx.AsyncClient``; it is not closed by this client
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not token:
            raise EmptyTokenError()
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_http = http_client is None
        # Calls are bounded by deadlines, not by transport timeouts
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=None)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def close(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> BaseClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, timeout={self._timeout})"

    def _effective_deadline(self, deadline: Deadline | None) -> Deadline | None:
        if deadline is not None:
            return deadline
        if self._timeout > 0:
            return Deadline.after(self._timeout)
        return None

    async def execute(self, request: RequestSpec, *, deadline: Deadline | None = None) -> Any:
        """Perform one API call.

        Returns:
            The response decoded into ``request.result``, or None when no result type is set

        Raises:
            BotAPIError: For any failure, classified by kind
            asyncio.CancelledError: If the calling task is cancelled; cancellation
                is passed through as is, not turned into a timeout error
        """
        op = request.operation
        deadline = self._effective_deadline(deadline)

        headers = {"Authorization": self._token}
        content: bytes | None = None
        if request.body is not None:
            try:
                content = encode_json(request.body)
            except (PydanticSerializationError, PydanticUserError, TypeError, ValueError) as e:
                raise BotAPIError.decode(op, e) from e
            headers["Content-Type"] = "application/json"

        response = await self._send(
            op,
            deadline,
            request.method,
            self._base_url + request.path,
            log_path=request.path,
            params=dict(request.query) if request.query else None,
            headers=headers,
            content=content,
        )

        if response.status_code != HTTPStatus.OK:
            raise self._remote_error(op, response)

        if request.result is None:
            return None
        try:
            return decode_json(response.content, request.result)
        except ValidationError as e:
            raise BotAPIError.decode(op, e) from e

    async def upload(
        self,
        op: str,
        url: str,
        filename: str,
        data: UploadData,
        *,
        deadline: Deadline | None = None,
    ) -> bytes:
        """POST ``data`` as a multipart file to a pre-issued upload URL.

        The upload URL is pre-signed, so no ``Authorization`` header is sent.

        Returns:
            Raw response body
        """
        deadline = self._effective_deadline(deadline)
        response = await self._send(
            op,
            deadline,
            HTTPMethod.POST,
            url,
            log_path="<upload>",
            files={UPLOAD_FIELD_NAME: (filename, data)},
        )
        if response.status_code != HTTPStatus.OK:
            raise self._remote_error(op, response)
        return response.content

    async def _send(
        self,
        op: str,
        deadline: Deadline | None,
        method: HTTPMethod,
        url: str,
        *,
        log_path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        started = time.monotonic()
        try:
            request = self._http.build_request(str(method), url, **kwargs)
            if deadline is None:
                response = await self._http.send(request)
            else:
                remaining = deadline.remaining()
                if remaining <= 0:
                    raise TimeoutError("deadline exceeded")
                async with asyncio.timeout(remaining):
                    response = await self._http.send(request)
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.debug("request timed out", op=op, method=str(method), path=log_path, error=str(e))
            raise BotAPIError.timeout(op, e) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("request failed", op=op, method=str(method), path=log_path, error=str(e))
            raise BotAPIError.network(op, e) from e

        logger.debug(
            "request completed",
            op=op,
            method=str(method),
            path=log_path,
            status=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )
        return response

    @staticmethod
    def _remote_error(op: str, response: httpx.Response) -> BotAPIError:
        status = response.status_code
        message = ""
        try:
            body = ErrorBody.model_validate_json(response.content)
        except ValidationError:
            body = None
        if body is not None:
            message = body.message or body.error or ""
        if not message:
            message = _status_text(status)
        return BotAPIError.api(op, status, message)


def _status_text(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""
