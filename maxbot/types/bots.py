"""Bot profile records."""

from __future__ import annotations

from typing import ClassVar

from maxbot.optional import Opt, OptStr, PartialModel
from maxbot.types.attachments import PhotoAttachmentRequestPayload
from maxbot.types.base import Composed, Record
from maxbot.types.users import UserWithPhoto


class BotCommand(Record):
    """Command supported by the bot."""

    name: str
    description: str | None = None


class BotInfo(Composed):
    """The bot's own profile, returned by GET /me."""

    embedded_field: ClassVar[str] = "profile"

    profile: UserWithPhoto
    commands: list[BotCommand] | None = None


class BotPatch(PartialModel):
    """Body of PATCH /me. Only set fields are changed."""

    name: OptStr = Opt()  # deprecated by the API, use first_name
    first_name: OptStr = Opt()
    description: OptStr = Opt()
    commands: list[BotCommand] | None = None
    photo: PhotoAttachmentRequestPayload | None = None
