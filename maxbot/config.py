"""Client configuration.

Settings come from keyword arguments, the environment (optionally seeded from
a ``.env`` file) or the ``max_bot:`` section of a YAML file:

    max_bot:
      token: ${MAXBOT_TOKEN}
      base_url: https://botapi.max.ru
      timeout: 30
"""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from maxbot.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_S,
    ENV_BASE_URL,
    ENV_DOTENV_PATH,
    ENV_TIMEOUT,
    ENV_TOKEN,
)
from maxbot.errors import ConfigError, EmptyTokenError

YAML_SECTION = "max_bot"


def expand_env_vars(config: object) -> object:
    """Recursively expand environment variables in config.

    Replaces ${VAR} patterns with environment variable values. Unknown
    variables are left as is.

    Args:
        config: Configuration object (dict, list, str, or primitive)

    Returns:
        Configuration with all ${VAR} patterns replaced
    """
    if isinstance(config, dict):
        return {k: expand_env_vars(v) for k, v in config.items()}
    if isinstance(config, list):
        return [expand_env_vars(item) for item in config]
    if isinstance(config, str):

        def replace_env_var(match: re.Match[str]) -> str:
            env_var = match.group(1)
            return os.getenv(env_var, match.group(0))

        return re.sub(r"\$\{([^}]+)\}", replace_env_var, config)
    return config


def parse_timeout(raw: object) -> float:
    """Timeout in seconds from a config value; 0 disables the default bound.

    Raises:
        ConfigError: If the value is not a finite, non-negative number
    """
    if isinstance(raw, bool):
        raise ConfigError(f"timeout must be a number of seconds, got {raw!r}")
    try:
        timeout = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ConfigError(f"timeout must be a number of seconds, got {raw!r}") from e
    if not math.isfinite(timeout) or timeout < 0:
        raise ConfigError(f"timeout must be a non-negative number of seconds, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings of a ``MaxBotClient``.

    Attributes:
        token: Bot access token
        base_url: API root
        timeout: Per-call bound in seconds when a call has no deadline; 0 disables it
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not self.token:
            raise EmptyTokenError()
        if not self.base_url:
            raise ConfigError("base_url is empty")
        object.__setattr__(self, "timeout", parse_timeout(self.timeout))

    def __repr__(self) -> str:
        return f"ClientConfig(token='***', base_url={self.base_url!r}, timeout={self.timeout})"

    @classmethod
    def from_env(cls, env_path: str | Path | None = None) -> ClientConfig:
        """Read ``MAXBOT_TOKEN``, ``MAXBOT_BASE_URL`` and ``MAXBOT_TIMEOUT``.

        A ``.env`` file is loaded first from ``env_path`` or ``MAXBOT_ENV_PATH``
        when either is set. Variables already in the environment win.
        """
        dotenv_path = env_path or os.getenv(ENV_DOTENV_PATH)
        if dotenv_path:
            load_dotenv(Path(dotenv_path).expanduser())

        raw_timeout = os.getenv(ENV_TIMEOUT)
        return cls(
            token=os.getenv(ENV_TOKEN, ""),
            base_url=os.getenv(ENV_BASE_URL) or DEFAULT_BASE_URL,
            timeout=parse_timeout(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_S,
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> ClientConfig:
        """Read the ``max_bot:`` section of a YAML file.

        Raises:
            ConfigError: If the file cannot be read or the section is malformed
            EmptyTokenError: If no token is configured
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot load config from {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        section = expand_env_vars(raw.get(YAML_SECTION) or {})
        if not isinstance(section, dict):
            raise ConfigError(f"{path}: '{YAML_SECTION}' must be a mapping")

        timeout = section.get("timeout")
        return cls(
            token=str(section.get("token") or ""),
            base_url=str(section.get("base_url") or DEFAULT_BASE_URL),
            timeout=parse_timeout(timeout) if timeout is not None else DEFAULT_TIMEOUT_S,
        )
