"""OAuth service for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable

from ._base import BaseClient, RequestConfig
from .exceptions import InvalidSecretError
from .models import (
    AccessToken,
    AccessTokenDTO,
    ClientInfo,
    ClientInfoDTO,
    CreateClientDTO,
    Scope,
)

# Application's secret length, in decoded bytes.
SECRET_LEN = 20


class OAuthService:
    """Service for token issuance and client registration."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize OAuth service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def token(self, app_id: str, secret: str) -> AccessToken:
        """Get a client credentials token from the API.

        Args:
            app_id: Application ID of the client
            secret: Base64 encoded client secret

        Returns:
            The access token granted to the application.

        Raises:
            InvalidSecretError: If the secret is not base64 of ``SECRET_LEN``
                bytes. No request is sent in that case.

        """
        try:
            raw_secret = base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError) as e:
            raise InvalidSecretError from e
        if len(raw_secret) != SECRET_LEN:
            raise InvalidSecretError

        credentials = base64.b64encode(f"{app_id}:{secret}".encode()).decode("ascii")
        config = RequestConfig(form_data={"grant_type": "client_credentials"})
        response = self._client.send_request(
            "POST",
            "token",
            headers={"Authorization": f"Basic {credentials}"},
            config=config,
        )
        return AccessToken.from_dto(self._client.decode(response, AccessTokenDTO))

    def create_client(
        self,
        access_token: AccessToken,
        name: str,
        scopes: Iterable[Scope],
        request_limit: int,
    ) -> ClientInfo:
        """Create a client application (admin only).

        Args:
            access_token: Admin scoped token
            name: Name of the new client
            scopes: Scopes the client will be allowed to request
            request_limit: Requests allowed per hour

        Returns:
            The created client, including its secret.

        """
        headers = self._client.authorize(access_token, access_token.is_admin())
        dto = CreateClientDTO(name=name, scopes=list(scopes), request_limit=request_limit)
        response = self._client.send_request(
            "POST", "create_client", headers=headers, config=RequestConfig(json_data=dto)
        )
        return ClientInfo.from_dto(self._client.decode(response, ClientInfoDTO))
