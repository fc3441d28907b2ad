"""Base classes shared by the API models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer, model_validator


class Record(BaseModel):  # type: ignore[explicit-any]
    """Immutable API record. Unknown JSON keys are ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Composed(Record):  # type: ignore[explicit-any]
    """Record that holds a richer base record under a named field.

    The API sends these flat (``{"user_id": 1, "first_name": "A", "avatar_url": ...}``).
    On input the flat object is also handed to the field named by
    ``embedded_field``; on output that field is merged back into the top level.
    """

    embedded_field: ClassVar[str]

    @model_validator(mode="before")
    @classmethod
    def lift_embedded(cls, data: Any) -> Any:
        if isinstance(data, dict) and cls.embedded_field not in data:
            return {**data, cls.embedded_field: data}
        return data

    @model_serializer(mode="wrap")
    def flatten_embedded(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if isinstance(data, dict):
            inner = data.pop(self.embedded_field, None)
            if isinstance(inner, dict):
                return {**inner, **data}
        return data


class SimpleQueryResult(Record):
    """Success flag returned by most mutating endpoints."""

    success: bool
    message: str | None = None
