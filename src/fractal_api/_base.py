"""Base HTTP client for Fractal API operations.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, TypeVar
from urllib.parse import urljoin

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .exceptions import (
    AuthorizationError,
    DecodeError,
    NetworkError,
    TimeoutError as FractalTimeoutError,
    TokenExpiredError,
    create_error_from_response,
)
from .models import AccessToken, ResponseDTO

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Fractal API server.
FRACTAL_SERVER = "https://api.fractal.global/"
# Fractal development API server.
FRACTAL_DEV_SERVER = "https://dev.fractal.global/"

API_VERSION_PATH = "v1/"
DEFAULT_USER_AGENT = "Fractal-Python-SDK/1.0.0"
ACCEPT_JSON = "application/json; charset=utf-8"
HTTP_OK = 200


class RequestConfig(NamedTuple):
    """Configuration for HTTP requests."""

    json_data: BaseModel | None = None
    form_data: dict[str, str] | None = None
    timeout: float | None = None


class BaseClient:
    """Base HTTP client for making API requests."""

    def __init__(
        self,
        base_url: str = FRACTAL_SERVER,
        timeout: float = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize base HTTP client.

        Args:
            base_url: Root URL of the API server, without the version path
            timeout: Read/write timeout in seconds applied to every request
            user_agent: Value of the ``User-Agent`` header
            transport: Optional httpx transport, mostly useful in tests

        """
        self.base_url = urljoin(base_url.rstrip("/") + "/", API_VERSION_PATH)
        self.timeout = timeout

        self._client = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent, "Accept": ACCEPT_JSON},
            transport=transport,
        )

    def __enter__(self) -> BaseClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    @staticmethod
    def authorize(access_token: AccessToken, permitted: bool) -> dict[str, str]:
        """Check an operation's scope requirement before any request is made.

        Args:
            access_token: Token of the caller
            permitted: Result of the operation's scope predicate on the token

        Returns:
            Headers carrying the token's bearer authorization.

        Raises:
            TokenExpiredError: If the token has expired
            AuthorizationError: If the token lacks the required scope

        """
        if access_token.has_expired():
            raise TokenExpiredError
        if not permitted:
            raise AuthorizationError
        return {"Authorization": access_token.authorization_header()}

    def send_request(
        self,
        method: str,
        endpoint: str,
        *,
        headers: dict[str, str] | None = None,
        config: RequestConfig | None = None,
    ) -> httpx.Response:
        """Send one request, resending it once on transport failure.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: Path below the versioned base URL, parameters included
            headers: Extra headers, usually the authorization
            config: Request configuration

        Returns:
            The response, whose status is always 200.

        Raises:
            APIError: The classified error for any other status
            DecodeError: If an error body is not a ``{message}`` document
            NetworkError: If both attempts fail at the transport level
            TimeoutError: If the second attempt times out

        """
        if config is None:
            config = RequestConfig()

        url = urljoin(self.base_url, endpoint.lstrip("/"))
        request = self._build_request(method, url, headers or {}, config)
        response = self._send_with_retry(request)

        if response.status_code == HTTP_OK:
            return response

        error_info = self._parse_error_response(response)
        # Only the first path segment is logged, later ones may carry keys.
        logger.debug(
            "%s %s failed with status %s",
            method,
            endpoint.lstrip("/").split("/")[0],
            response.status_code,
        )
        raise create_error_from_response(response.status_code, error_info.message)

    def _build_request(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        config: RequestConfig,
    ) -> httpx.Request:
        timeout = config.timeout or self.timeout
        if config.form_data:
            return self._client.build_request(
                method, url, data=config.form_data, headers=headers, timeout=timeout
            )

        json_data = (
            config.json_data.model_dump(mode="json")
            if config.json_data is not None
            else None
        )
        return self._client.build_request(
            method, url, json=json_data, headers=headers, timeout=timeout
        )

    def _send_with_retry(self, request: httpx.Request) -> httpx.Response:
        try:
            return self._client.send(request)
        except httpx.TransportError as e:
            logger.debug(
                "Transport error on %s %s, retrying once: %r",
                request.method,
                request.url.host,
                e,
            )

        try:
            return self._client.send(request)
        except httpx.TimeoutException as e:
            raise FractalTimeoutError("Request timeout") from e
        except httpx.TransportError as e:
            raise NetworkError("Network error") from e

    @staticmethod
    def _parse_error_response(response: httpx.Response) -> ResponseDTO:
        """Parse the ``{message}`` body of a non-200 response.

        Raises:
            DecodeError: If the body is not valid JSON of that shape.

        """
        try:
            return ResponseDTO.model_validate_json(response.content)
        except ValidationError as e:
            msg = f"Could not decode the body of a {response.status_code} response"
            raise DecodeError(msg, {"status_code": response.status_code}) from e

    @staticmethod
    def decode(response: httpx.Response, model: type[M]) -> M:
        """Decode a success body into the given DTO model.

        Raises:
            DecodeError: If the body does not match the model.

        """
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            msg = f"Could not decode response as {model.__name__}"
            raise DecodeError(msg) from e

    @staticmethod
    def decode_list(response: httpx.Response, model: type[M]) -> list[M]:
        """Decode a success body holding a JSON array of the given DTO model.

        Raises:
            DecodeError: If the body or any element does not match the model.

        """
        try:
            return TypeAdapter(list[model]).validate_json(response.content)
        except ValidationError as e:
            msg = f"Could not decode response as a list of {model.__name__}"
            raise DecodeError(msg) from e
