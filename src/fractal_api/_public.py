"""Public service for the Fractal API.

Registration, login and the email and password workflows that run before a
user is logged in.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from .models import (
    AccessToken,
    AccessTokenDTO,
    EmailDTO,
    LoginDTO,
    NewPasswordDTO,
    RegisterDTO,
    ResetPasswordDTO,
)


class PublicService:
    """Service for public scoped operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize public service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def register(
        self,
        access_token: AccessToken,
        username: str,
        password: str,
        email: str,
    ) -> None:
        """Register a new user.

        Args:
            access_token: Public scoped token
            username: Desired username
            password: Password of the new account
            email: Email address to confirm

        """
        headers = self._client.authorize(access_token, access_token.is_public())
        dto = RegisterDTO(username=username, password=password, email=email)
        self._client.send_request(
            "POST", "register", headers=headers, config=RequestConfig(json_data=dto)
        )

    def login(
        self,
        access_token: AccessToken,
        user_email: str,
        password: str,
        remember_me: bool = False,
    ) -> AccessToken:
        """Log a user in.

        Args:
            access_token: Public scoped token
            user_email: Username or email of the user
            password: User's password
            remember_me: Whether to extend the token lifetime

        Returns:
            A new token carrying the user's scope.

        """
        headers = self._client.authorize(access_token, access_token.is_public())
        dto = LoginDTO(user_email=user_email, password=password, remember_me=remember_me)
        response = self._client.send_request(
            "POST", "login", headers=headers, config=RequestConfig(json_data=dto)
        )
        return AccessToken.from_dto(self._client.decode(response, AccessTokenDTO))

    def resend_email_confirmation(self, access_token: AccessToken) -> None:
        """Resend the email confirmation of the logged in user."""
        headers = self._client.authorize(
            access_token, access_token.get_user_id() is not None
        )
        self._client.send_request("GET", "resend_email_confirmation", headers=headers)

    def confirm_email(self, access_token: AccessToken, email_key: str) -> None:
        """Confirm a user's email with the key sent to it."""
        headers = self._client.authorize(access_token, access_token.is_public())
        self._client.send_request("POST", f"confirm_email/{email_key}", headers=headers)

    def start_reset_password(
        self,
        access_token: AccessToken,
        username: str,
        email: str,
    ) -> None:
        """Begin the reset password process."""
        headers = self._client.authorize(access_token, access_token.is_public())
        dto = ResetPasswordDTO(username=username, email=email)
        self._client.send_request(
            "POST",
            "start_reset_password",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )

    def reset_password(
        self,
        access_token: AccessToken,
        password_key: str,
        new_password: str,
    ) -> None:
        """Confirm a password reset with the key sent by email."""
        headers = self._client.authorize(access_token, access_token.is_public())
        dto = NewPasswordDTO(new_password=new_password)
        self._client.send_request(
            "POST",
            f"reset_password/{password_key}",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )

    def subscribe(self, access_token: AccessToken, email: str) -> None:
        """Subscribe an email address to the mailing list."""
        headers = self._client.authorize(access_token, access_token.is_public())
        self._client.send_request(
            "POST",
            "subscribe",
            headers=headers,
            config=RequestConfig(json_data=EmailDTO(email=email)),
        )

    def confirm_subscription(self, access_token: AccessToken, key: str) -> None:
        """Confirm a mailing list subscription."""
        headers = self._client.authorize(access_token, access_token.is_public())
        self._client.send_request("GET", f"confirm_subscription/{key}", headers=headers)

    def unsubscribe(self, access_token: AccessToken, key: str) -> None:
        """Remove a confirmed subscription from the mailing list."""
        headers = self._client.authorize(access_token, access_token.is_public())
        self._client.send_request("GET", f"unsubscribe/{key}", headers=headers)
