"""Constants used across maxbot.

This module defines shared constants to ensure consistency.
"""

# API endpoint
DEFAULT_BASE_URL = "https://botapi.max.ru"

# Per-call bound applied when the caller passes no deadline (seconds)
DEFAULT_TIMEOUT_S = 30.0

# Long polling
DEFAULT_POLLING_TIMEOUT_S = 30  # Server-side default for GET /updates
POLLING_BUFFER_S = 5.0  # Client window on top of the server-side poll

# Multipart part name expected by the upload servers
UPLOAD_FIELD_NAME = "data"

# Environment variables read by ClientConfig.from_env
ENV_TOKEN = "MAXBOT_TOKEN"
ENV_BASE_URL = "MAXBOT_BASE_URL"
ENV_TIMEOUT = "MAXBOT_TIMEOUT"
ENV_DOTENV_PATH = "MAXBOT_ENV_PATH"
ENV_LOG_LEVEL = "MAXBOT_LOG_LEVEL"
