"""Friend request models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Relationship(str, Enum):
    """Kind of connection between two users."""

    FRIEND = "Friend"
    ACQUAINTANCE = "Acquaintance"
    FAMILY = "Family"
    BUSINESS = "Business"
    ROMANTIC = "Romantic"


class FriendRequestDTO(BaseModel):
    """Friend request creation model."""

    origin_id: int
    destination_id: int
    relationship: Relationship
    message: str | None = None


class ConfirmFriendRequestDTO(BaseModel):
    """Confirmation or rejection of a pending friend request."""

    id: int
    origin: int
    destination: int


class PendingFriendRequestDTO(BaseModel):
    """Pending friend request as returned by the server."""

    id: int
    origin_user: int
    destination_user: int
    relationship: Relationship
    message: str | None = None
    timestamp: datetime


class PendingFriendRequest(BaseModel):
    """A friend request waiting for the destination user's answer."""

    model_config = ConfigDict(frozen=True)

    id: int
    origin_user: int
    destination_user: int
    relationship: Relationship
    message: str | None = None
    timestamp: datetime

    @classmethod
    def from_dto(cls, dto: PendingFriendRequestDTO) -> PendingFriendRequest:
        return cls(**dto.model_dump())
