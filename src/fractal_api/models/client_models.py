"""Client application models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .token_models import Scope


class CreateClientDTO(BaseModel):
    """Create client request model."""

    name: str
    scopes: list[Scope]
    request_limit: int


class ClientInfoDTO(BaseModel):
    """Client application as returned by the server."""

    id: str
    name: str
    secret: str
    scopes: list[Scope]
    request_limit: int


class ClientInfo(BaseModel):
    """A registered client application and its credentials."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    secret: str = Field(repr=False)
    scopes: tuple[Scope, ...]
    request_limit: int

    @classmethod
    def from_dto(cls, dto: ClientInfoDTO) -> ClientInfo:
        return cls(
            id=dto.id,
            name=dto.name,
            secret=dto.secret,
            scopes=tuple(dto.scopes),
            request_limit=dto.request_limit,
        )
