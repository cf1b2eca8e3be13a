"""User management service for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from ._base import BaseClient, RequestConfig
from .models import (
    AccessToken,
    Address,
    AuthenticationCodeDTO,
    Profile,
    ProfileDTO,
    ResponseDTO,
    UpdateUserDTO,
    User,
    UserDTO,
)


class UserService:
    """Service for user getters, setters and administration."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize user service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def get_user(self, access_token: AccessToken, user_id: int) -> User:
        """Get a user by ID.

        Args:
            access_token: Admin token, or the user's own token
            user_id: User ID

        Returns:
            The user.

        """
        headers = self._client.authorize(
            access_token, access_token.is_admin() or access_token.is_user(user_id)
        )
        response = self._client.send_request("GET", f"user/{user_id}", headers=headers)
        return User.from_dto(self._client.decode(response, UserDTO))

    def get_me(self, access_token: AccessToken) -> User:
        """Get the user the token belongs to."""
        user_id = access_token.get_user_id()
        headers = self._client.authorize(access_token, user_id is not None)
        response = self._client.send_request("GET", f"user/{user_id}", headers=headers)
        return User.from_dto(self._client.decode(response, UserDTO))

    def get_all_users(self, access_token: AccessToken) -> list[User]:
        """Get every user (admin only)."""
        headers = self._client.authorize(access_token, access_token.is_admin())
        response = self._client.send_request("GET", "all_users", headers=headers)
        return [User.from_dto(u) for u in self._client.decode_list(response, UserDTO)]

    def delete_user(self, access_token: AccessToken, user_id: int) -> None:
        """Delete a user (admin only)."""
        headers = self._client.authorize(access_token, access_token.is_admin())
        self._client.send_request("DELETE", f"user/{user_id}", headers=headers)

    def search_user_random(self, access_token: AccessToken) -> Profile:
        """Get the public profile of a random user to connect with."""
        headers = self._client.authorize(
            access_token, access_token.get_user_id() is not None
        )
        response = self._client.send_request("GET", "search_user_random", headers=headers)
        return Profile.from_dto(self._client.decode(response, ProfileDTO))

    def generate_authenticator_code(
        self,
        access_token: AccessToken,
        user_id: int,
    ) -> str:
        """Get the authenticator code to scan for two factor authentication.

        Args:
            access_token: The user's own token
            user_id: User ID

        Returns:
            The authenticator code, usually rendered as a QR code.

        """
        headers = self._client.authorize(access_token, access_token.is_user(user_id))
        response = self._client.send_request(
            "GET", f"authenticator/{user_id}", headers=headers
        )
        return self._client.decode(response, ResponseDTO).message

    def authenticate(self, access_token: AccessToken, user_id: int, code: int) -> None:
        """Authenticate the user with a two factor code."""
        headers = self._client.authorize(access_token, access_token.is_user(user_id))
        dto = AuthenticationCodeDTO(code=code, timestamp=datetime.now(timezone.utc))
        self._client.send_request(
            "POST",
            f"authenticate/{user_id}",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )

    def set_username(
        self,
        access_token: AccessToken,
        user_id: int,
        username: str,
        password: str | None = None,
    ) -> None:
        """Set the user's username.

        ``password`` is the user's current password; admins may omit it.
        """
        dto = UpdateUserDTO(new_username=username, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_phone(
        self,
        access_token: AccessToken,
        user_id: int,
        phone: str,
        password: str | None = None,
    ) -> None:
        """Set the user's phone number."""
        dto = UpdateUserDTO(new_phone=phone, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_birthday(
        self,
        access_token: AccessToken,
        user_id: int,
        birthday: date,
        password: str | None = None,
    ) -> None:
        """Set the user's date of birth."""
        dto = UpdateUserDTO(new_birthday=birthday, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_name(
        self,
        access_token: AccessToken,
        user_id: int,
        first: str,
        last: str,
        password: str | None = None,
    ) -> None:
        """Set the user's first and last name."""
        dto = UpdateUserDTO(new_first=first, new_last=last, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_email(
        self,
        access_token: AccessToken,
        user_id: int,
        email: str,
        password: str | None = None,
    ) -> None:
        """Set the user's email, which will need to be confirmed again."""
        dto = UpdateUserDTO(new_email=email, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_image(
        self,
        access_token: AccessToken,
        user_id: int,
        image: str,
        password: str | None = None,
    ) -> None:
        """Set the user's profile image."""
        dto = UpdateUserDTO(new_image=image, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_address(
        self,
        access_token: AccessToken,
        user_id: int,
        address: Address,
        password: str | None = None,
    ) -> None:
        """Set the user's postal address."""
        dto = UpdateUserDTO(new_address=address, old_password=password)
        self._update_user(access_token, user_id, dto)

    def set_password(
        self,
        access_token: AccessToken,
        old_password: str,
        new_password: str,
    ) -> None:
        """Change the password of the user the token belongs to."""
        user_id = access_token.get_user_id()
        headers = self._client.authorize(access_token, user_id is not None)
        dto = UpdateUserDTO(old_password=old_password, new_password=new_password)
        self._client.send_request(
            "POST",
            f"update_user/{user_id}",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )

    def _update_user(
        self,
        access_token: AccessToken,
        user_id: int,
        dto: UpdateUserDTO,
    ) -> None:
        headers = self._client.authorize(
            access_token, access_token.is_admin() or access_token.is_user(user_id)
        )
        self._client.send_request(
            "POST",
            f"update_user/{user_id}",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )
