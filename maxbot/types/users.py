"""User records."""

from __future__ import annotations

from typing import ClassVar

from maxbot.types.base import Composed, Record


class User(Record):
    """A Max user."""

    user_id: int = 0
    first_name: str = ""
    last_name: str | None = None
    username: str | None = None
    is_bot: bool = False
    last_activity_time: int = 0


class UserWithPhoto(Composed):
    """A user together with avatar and description."""

    embedded_field: ClassVar[str] = "user"

    user: User
    description: str | None = None
    avatar_url: str | None = None
    full_avatar_url: str | None = None
