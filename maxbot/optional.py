"""Tri-state optional fields for partial-update request bodies.

``Opt[T]`` tells apart three states a field of a request body can be in:

- absent (``Opt()``): the key is left out of the JSON object
- present with a zero value (``some("")``, ``some(False)``, ``some(0)``)
- present with a value (``some("hello")``)

Plain ``T | None`` cannot express "clear this text" versus "leave it alone"
when editing a message; ``Opt`` can.

Opt fields only drop out of the JSON when they live on a ``PartialModel``.
Serialized on its own, an absent ``Opt`` becomes JSON ``null``. Decoding
treats ``null`` exactly like a missing key, so a server echoing ``null``
never reads back as "set to nothing".
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, get_args

from pydantic import (
    BaseModel,
    ConfigDict,
    GetCoreSchemaHandler,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)
from pydantic_core import core_schema

from maxbot.codec import adapter_for
from maxbot.errors import BotAPIError

T = TypeVar("T")

__all__ = ["Opt", "OptBool", "OptInt", "OptStr", "PartialModel", "decode_opt", "encode_opt", "some"]


class Opt(Generic[T]):
    """A value that may or may not be set. ``Opt()`` is unset."""

    __slots__ = ("_value", "_present")

    def __init__(self, value: T | None = None, present: bool = False) -> None:
        self._value = value
        self._present = present

    @classmethod
    def some(cls, value: T) -> Opt[T]:
        """Create a set ``Opt`` holding ``value``."""
        return cls(value, True)

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def present(self) -> bool:
        return self._present

    def get(self, default: T | None = None) -> T | None:
        """Return the value when set, otherwise ``default``."""
        return self._value if self._present else default

    def encode(self) -> T | None:
        """Python value written to JSON; ``None`` (null) when unset."""
        return self._value if self._present else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Opt):
            return NotImplemented
        if not self._present or not other._present:
            return self._present == other._present
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((self._present, self._value if self._present else None))

    def __repr__(self) -> str:
        if not self._present:
            return "Opt()"
        return f"Opt.some({self._value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        args = get_args(source)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()

        def validate(raw: Any, validate_inner: core_schema.ValidatorFunctionWrapHandler) -> Opt[Any]:
            if isinstance(raw, Opt):
                if not raw.present:
                    return raw
                raw = raw.value
            # null means "not set", never "set to null"
            if raw is None:
                return cls()
            return cls.some(validate_inner(raw))

        return core_schema.no_info_wrap_validator_function(
            validate,
            inner,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_opt,
                return_schema=core_schema.nullable_schema(inner),
            ),
        )


def _serialize_opt(opt: Opt[Any]) -> Any:
    return opt.encode()


def some(value: T) -> Opt[T]:
    """Shorthand for ``Opt.some(value)``."""
    return Opt.some(value)


OptStr = Opt[str]
OptBool = Opt[bool]
OptInt = Opt[int]


class PartialModel(BaseModel):  # type: ignore[explicit-any]
    """Request body whose unset ``Opt`` fields are omitted from the JSON."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_serializer(mode="wrap")
    def omit_unset_fields(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        for name, field in type(self).model_fields.items():
            current = getattr(self, name)
            if isinstance(current, Opt) and not current.present:
                data.pop(name, None)
                if field.alias:
                    data.pop(field.alias, None)
        return data


def encode_opt(opt: Opt[Any]) -> bytes:
    """Serialize a bare ``Opt``; unset encodes as ``null``."""
    return adapter_for(Opt[Any]).dump_json(opt)


def decode_opt(raw: str | bytes, value_type: Any, *, op: str = "DecodeOptional") -> Opt[Any]:
    """Decode one JSON token into ``Opt[value_type]``.

    Raises:
        BotAPIError: decode kind when the token does not match ``value_type``
    """
    try:
        return adapter_for(Opt[value_type]).validate_json(raw)  # type: ignore[valid-type]
    except ValidationError as e:
        raise BotAPIError.decode(op, e) from e
