"""API endpoint groups mixed into ``MaxBotClient``."""

from maxbot.endpoints.bots import BotsMixin
from maxbot.endpoints.chats import ChatsMixin
from maxbot.endpoints.messages import MessagesMixin
from maxbot.endpoints.subscriptions import SubscriptionsMixin
from maxbot.endpoints.updates import UpdatesMixin
from maxbot.endpoints.uploads import UploadsMixin

__all__ = [
    "BotsMixin",
    "ChatsMixin",
    "MessagesMixin",
    "SubscriptionsMixin",
    "UpdatesMixin",
    "UploadsMixin",
]
