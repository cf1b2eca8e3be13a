"""Fractal Global Credits client using service composition.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import httpx

from ._base import DEFAULT_USER_AGENT, FRACTAL_DEV_SERVER, FRACTAL_SERVER, BaseClient
from ._friends import FriendService
from ._oauth import OAuthService
from ._public import PublicService
from ._transactions import TransactionService
from ._user import UserService
from .config import ClientSettings


class FractalClient:
    """Fractal Global Credits API client."""

    def __init__(
        self,
        base_url: str = FRACTAL_SERVER,
        *,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Fractal client.

        Args:
            base_url: Root URL of the API server, the production server by default
            timeout: Read/write timeout in seconds for every request
            user_agent: Value of the ``User-Agent`` header
            transport: Optional httpx transport, mostly useful in tests

        """
        self._client = BaseClient(
            base_url=base_url,
            timeout=timeout,
            user_agent=user_agent,
            transport=transport,
        )

        # Initialize service clients
        self.oauth = OAuthService(self._client)
        self.public = PublicService(self._client)
        self.user = UserService(self._client)
        self.friends = FriendService(self._client)
        self.transactions = TransactionService(self._client)

    @classmethod
    def dev(cls, *, timeout: float = 30.0) -> FractalClient:
        """Create a client for the development server."""
        return cls(FRACTAL_DEV_SERVER, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> FractalClient:
        """Create a client from settings, read from the environment by default."""
        if settings is None:
            settings = ClientSettings()
        return cls(
            settings.api_url,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )

    @property
    def base_url(self) -> str:
        """Versioned URL every endpoint path is resolved against."""
        return self._client.base_url

    def __enter__(self) -> FractalClient:
        """Context manager entry.

        Returns:
            The client instance.

        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Context manager exit.

        Args:
            exc_type: Exception type if an exception occurred
            exc_val: Exception value if an exception occurred
            exc_tb: Exception traceback if an exception occurred

        """
        self.close()

    def close(self) -> None:
        """Close the client and clean up resources."""
        self._client.close()
