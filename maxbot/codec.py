"""JSON encode/decode helpers backed by cached pydantic TypeAdapters."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter


@lru_cache(maxsize=256)
def adapter_for(target: Any) -> TypeAdapter[Any]:
    """Return a (cached) TypeAdapter for ``target``."""
    return TypeAdapter(target)


def encode_json(value: object) -> bytes:
    """Serialize a request value to JSON bytes.

    ``None`` fields are dropped; absent tri-state fields are dropped by the
    models that declare them.
    """
    return adapter_for(type(value)).dump_json(value, by_alias=True, exclude_none=True)


def decode_json(raw: str | bytes, target: Any) -> Any:
    """Validate raw JSON into ``target``. Raises pydantic.ValidationError."""
    return adapter_for(target).validate_json(raw)
