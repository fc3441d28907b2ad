"""Error types raised by the maxbot client.

Every failure of an API call surfaces as a single ``BotAPIError`` whose
``kind`` tells callers what went wrong:

- ``API``: the server answered with a non-200 status
- ``NETWORK``: the request never produced a response
- ``TIMEOUT``: the call deadline or the transport timeout fired
- ``DECODE``: a request body could not be encoded or a response decoded

Example:
    try:
        await client.get_chat(42)
    except BotAPIError as e:
        if e.kind is ErrorKind.API and e.status_code == 404:
            ...
        elif e.is_timeout:
            ...
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "BotAPIError",
    "ConfigError",
    "EmptyTokenError",
    "ErrorKind",
    "MaxBotError",
    "PollDeadlineError",
]


class ErrorKind(str, Enum):
    """Category of a classified client error."""

    API = "api"
    NETWORK = "network"
    TIMEOUT = "timeout"
    DECODE = "decode"

    def __str__(self) -> str:
        return self.value


class MaxBotError(Exception):
    """Base class for all maxbot errors."""


class EmptyTokenError(MaxBotError, ValueError):
    """Raised when a client is created without a bot token."""

    def __init__(self) -> None:
        super().__init__("bot token is empty")


class ConfigError(MaxBotError, ValueError):
    """Raised when client configuration values are invalid."""


class PollDeadlineError(MaxBotError):
    """Caller deadline is too short for the long-polling window.

    Raised before any request is sent.
    """

    def __init__(self, remaining: float, required: float) -> None:
        super().__init__(
            f"deadline too short for long polling: {remaining:.1f}s left, need at least {required:.1f}s"
        )
        self.remaining = remaining
        self.required = required


class BotAPIError(MaxBotError):
    """Classified failure of a single client operation."""

    def __init__(
        self,
        kind: ErrorKind,
        op: str,
        message: str = "",
        *,
        status_code: int = 0,
        cause: BaseException | None = None,
    ) -> None:
        self._kind = kind
        self._op = op
        self._message = message
        self._status_code = status_code if kind is ErrorKind.API else 0
        self._cause = cause
        super().__init__(self._describe())

    @classmethod
    def api(cls, op: str, status_code: int, message: str) -> BotAPIError:
        """Server rejected the request with a non-200 status."""
        return cls(ErrorKind.API, op, message, status_code=status_code)

    @classmethod
    def network(cls, op: str, cause: BaseException) -> BotAPIError:
        """Transport failed before a response was received."""
        return cls(ErrorKind.NETWORK, op, _cause_text(cause), cause=cause)

    @classmethod
    def timeout(cls, op: str, cause: BaseException) -> BotAPIError:
        """Deadline or transport timeout fired."""
        return cls(ErrorKind.TIMEOUT, op, _cause_text(cause), cause=cause)

    @classmethod
    def decode(cls, op: str, cause: BaseException) -> BotAPIError:
        """Request encoding or response decoding failed."""
        return cls(ErrorKind.DECODE, op, _cause_text(cause), cause=cause)

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def op(self) -> str:
        return self._op

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def is_timeout(self) -> bool:
        return self._kind is ErrorKind.TIMEOUT

    def unwrap(self) -> BaseException | None:
        """Return the underlying error (None for API errors)."""
        return self._cause

    def _describe(self) -> str:
        if self._kind is ErrorKind.API:
            return f"{self._op}: {self._kind.value} error {self._status_code}: {self._message}"
        if self._message:
            return f"{self._op}: {self._kind.value}: {self._message}"
        return f"{self._op}: {self._kind.value}"

    def __repr__(self) -> str:
        return (
            f"BotAPIError(kind={self._kind.value!r}, op={self._op!r}, "
            f"status_code={self._status_code}, message={self._message!r})"
        )


def _cause_text(cause: BaseException) -> str:
    text = str(cause)
    return text or type(cause).__name__
