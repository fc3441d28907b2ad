"""Public package surface."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from maxbot.client import MaxBotClient
from maxbot.config import ClientConfig
from maxbot.deadline import Deadline
from maxbot.decoder import VariantDecoder
from maxbot.dispatch import RequestSpec
from maxbot.errors import BotAPIError, ConfigError, EmptyTokenError, ErrorKind, MaxBotError, PollDeadlineError
from maxbot.optional import Opt, OptBool, OptInt, OptStr, PartialModel, decode_opt, encode_opt, some
from maxbot.polling import PollOptions, poll_deadline


def _version_from_pyproject() -> str:
    """Fallback to pyproject.toml when package metadata is unavailable."""
    pyproject_path = Path(__file__).resolve().parent.parent / "pyproject.toml"
    try:
        data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return "0.0.0"

    project = data.get("project")
    if not isinstance(project, dict):
        return "0.0.0"

    project_version = project.get("version")
    if not isinstance(project_version, str):
        return "0.0.0"

    return project_version


def _resolve_version() -> str:
    """Read runtime version from installed package metadata."""
    try:
        return version("maxbot")
    except PackageNotFoundError:
        return _version_from_pyproject()


__version__ = _resolve_version()

__all__ = [
    "BotAPIError",
    "ClientConfig",
    "ConfigError",
    "Deadline",
    "EmptyTokenError",
    "ErrorKind",
    "MaxBotClient",
    "MaxBotError",
    "Opt",
    "OptBool",
    "OptInt",
    "OptStr",
    "PartialModel",
    "PollDeadlineError",
    "PollOptions",
    "RequestSpec",
    "VariantDecoder",
    "__version__",
    "decode_opt",
    "encode_opt",
    "poll_deadline",
    "some",
]
