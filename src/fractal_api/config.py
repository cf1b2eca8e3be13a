"""Environment driven settings for the Fractal client.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._base import DEFAULT_USER_AGENT, FRACTAL_SERVER


class ClientSettings(BaseSettings):
    """Client settings read from ``FRACTAL_*`` environment variables.

    ``FRACTAL_API_URL`` selects the server, ``FRACTAL_TIMEOUT`` the per
    request timeout in seconds and ``FRACTAL_USER_AGENT`` the user agent.
    """

    model_config = SettingsConfigDict(
        env_prefix="FRACTAL_",
        env_file=".env",
        extra="ignore",
    )

    api_url: str = FRACTAL_SERVER
    timeout: float = Field(30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
