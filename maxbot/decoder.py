"""Decoding of tagged JSON payloads into typed variants.

Updates and message attachments arrive as JSON objects whose shape is chosen
by a string field (``update_type`` or ``type``). A ``VariantDecoder`` maps each
tag to the model registered for it and decodes blobs into those models.

Tags the decoder does not know are skipped: the API adds new update and
attachment kinds over time and an older client must keep working. Malformed
blobs are a different matter and fail the whole decode.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Generic, Literal, TypeAlias, TypeVar, get_args, get_origin

import pydantic_core
from pydantic import BaseModel, ValidationError
from structlog import get_logger

from maxbot.errors import BotAPIError

logger = get_logger(__name__)

V = TypeVar("V", bound=BaseModel)

RawPayload: TypeAlias = bytes | str | Mapping[str, Any]


class VariantDecoder(Generic[V]):
    """Resolve tagged JSON blobs to a closed set of variant models.

    Args:
        discriminator: Name of the tag field inside each blob
        variants: Variant models; each declares the tag field as ``Literal[...]``
        operation: Operation name carried by decode errors
    """

    def __init__(self, discriminator: str, variants: Iterable[type[V]], *, operation: str) -> None:
        self.discriminator = discriminator
        self.operation = operation
        registry: dict[str, type[V]] = {}
        for variant in variants:
            for tag in _literal_tags(variant, discriminator):
                if tag in registry:
                    raise ValueError(f"duplicate {discriminator} tag {tag!r} ({registry[tag].__name__}, {variant.__name__})")
                registry[tag] = variant
        self._registry = registry

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._registry)

    def variant_for(self, tag: str) -> type[V] | None:
        return self._registry.get(tag)

    def tag_of(self, blob: RawPayload) -> str | None:
        """Read only the discriminator of ``blob``.

        Returns:
            The tag, or None when the blob carries none

        Raises:
            BotAPIError: decode kind for invalid JSON, non-object blobs or a non-string tag
        """
        return self._read_tag(self._as_object(blob))

    def decode(self, blob: RawPayload) -> V | None:
        """Decode one blob; None when its tag is unknown or missing."""
        obj = self._as_object(blob)
        tag = self._read_tag(obj)
        variant = self._registry.get(tag) if tag is not None else None
        if variant is None:
            logger.debug("skipping unknown payload", discriminator=self.discriminator, tag=tag)
            return None
        try:
            return variant.model_validate(obj)
        except ValidationError as e:
            raise BotAPIError.decode(self.operation, e) from e

    def decode_all(self, blobs: Sequence[RawPayload] | None) -> list[V] | None:
        """Decode blobs in order, dropping unknown tags.

        Returns None only when ``blobs`` is None; an empty sequence gives ``[]``.
        """
        if blobs is None:
            return None
        decoded: list[V] = []
        for blob in blobs:
            value = self.decode(blob)
            if value is not None:
                decoded.append(value)
        return decoded

    def _as_object(self, blob: RawPayload) -> Mapping[str, Any]:
        if isinstance(blob, (bytes, str)):
            try:
                blob = pydantic_core.from_json(blob)
            except ValueError as e:
                raise BotAPIError.decode(self.operation, e) from e
        if not isinstance(blob, Mapping):
            raise BotAPIError.decode(
                self.operation, TypeError(f"payload must be a JSON object, got {type(blob).__name__}")
            )
        return blob

    def _read_tag(self, obj: Mapping[str, Any]) -> str | None:
        tag = obj.get(self.discriminator)
        if tag is None:
            return None
        if not isinstance(tag, str):
            raise BotAPIError.decode(
                self.operation,
                TypeError(f"{self.discriminator} must be a string, got {type(tag).__name__}"),
            )
        return tag


def _literal_tags(variant: type[BaseModel], discriminator: str) -> tuple[str, ...]:
    field = variant.model_fields.get(discriminator)
    if field is None or get_origin(field.annotation) is not Literal:
        raise TypeError(f"{variant.__name__}.{discriminator} must be annotated as Literal[...]")
    return tuple(str(getattr(arg, "value", arg)) for arg in get_args(field.annotation))
