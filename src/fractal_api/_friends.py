"""Friend request service for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from .models import (
    AccessToken,
    ConfirmFriendRequestDTO,
    FriendRequestDTO,
    PendingFriendRequest,
    PendingFriendRequestDTO,
    Profile,
    ProfileDTO,
    Relationship,
)


class FriendService:
    """Service for connections between users."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize friend service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def send_friend_request(
        self,
        access_token: AccessToken,
        user_id: int,
        relationship: Relationship,
        message: str | None = None,
    ) -> None:
        """Create a pending invitation to connect with a user.

        Args:
            access_token: Token of the inviting user
            user_id: ID of the user to invite
            relationship: Kind of connection proposed
            message: Optional note shown with the request

        """
        origin_id = access_token.get_user_id()
        headers = self._client.authorize(access_token, origin_id is not None)
        dto = FriendRequestDTO(
            origin_id=origin_id,
            destination_id=user_id,
            relationship=relationship,
            message=message,
        )
        self._client.send_request(
            "POST",
            "create_friend_request",
            headers=headers,
            config=RequestConfig(json_data=dto),
        )

    def confirm_friend_request(
        self,
        access_token: AccessToken,
        connection_id: int,
        user_id: int,
    ) -> None:
        """Accept a pending request sent by ``user_id``."""
        self._answer_friend_request(
            "confirm_friend_request", access_token, connection_id, user_id
        )

    def reject_friend_request(
        self,
        access_token: AccessToken,
        connection_id: int,
        user_id: int,
    ) -> None:
        """Decline a pending request sent by ``user_id``."""
        self._answer_friend_request(
            "reject_friend_request", access_token, connection_id, user_id
        )

    def unfriend(self, access_token: AccessToken, user_id: int) -> None:
        """Remove the connection with a user."""
        headers = self._client.authorize(
            access_token, access_token.get_user_id() is not None
        )
        self._client.send_request("DELETE", f"friend/{user_id}", headers=headers)

    def get_friend_requests(
        self,
        access_token: AccessToken,
        user_id: int,
    ) -> list[PendingFriendRequest]:
        """Get all the pending friend requests of a user.

        Args:
            access_token: Admin token, or the user's own token
            user_id: User ID

        Returns:
            Pending requests addressed to the user.

        """
        headers = self._client.authorize(
            access_token, access_token.is_admin() or access_token.is_user(user_id)
        )
        response = self._client.send_request(
            "GET", f"friend_requests/{user_id}", headers=headers
        )
        return [
            PendingFriendRequest.from_dto(r)
            for r in self._client.decode_list(response, PendingFriendRequestDTO)
        ]

    def get_friends(self, access_token: AccessToken, user_id: int) -> list[Profile]:
        """Get the public profiles of a user's connections."""
        headers = self._client.authorize(
            access_token, access_token.is_admin() or access_token.is_user(user_id)
        )
        response = self._client.send_request("GET", f"friends/{user_id}", headers=headers)
        return [Profile.from_dto(p) for p in self._client.decode_list(response, ProfileDTO)]

    def _answer_friend_request(
        self,
        endpoint: str,
        access_token: AccessToken,
        connection_id: int,
        origin_id: int,
    ) -> None:
        destination_id = access_token.get_user_id()
        headers = self._client.authorize(access_token, destination_id is not None)
        dto = ConfirmFriendRequestDTO(
            id=connection_id, origin=origin_id, destination=destination_id
        )
        self._client.send_request(
            "POST", endpoint, headers=headers, config=RequestConfig(json_data=dto)
        )
