"""Scope and access token models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from ..exceptions import FromDTOError


class ScopeKind(str, Enum):
    """Tag of a scope variant."""

    ADMIN = "Admin"
    USER = "User"
    PUBLIC = "Public"
    DEVELOPER = "Developer"


class Scope(BaseModel):
    """A capability grant carried by an access token.

    Only the ``User`` variant carries data, the id of the authenticated user.
    On the wire unit variants are bare strings (``"Admin"``) and the user
    variant is ``{"variant": "User", "fields": [<id>]}``.
    """

    model_config = ConfigDict(frozen=True)

    kind: ScopeKind
    user_id: int | None = None

    @classmethod
    def admin(cls) -> Scope:
        return cls(kind=ScopeKind.ADMIN)

    @classmethod
    def public(cls) -> Scope:
        return cls(kind=ScopeKind.PUBLIC)

    @classmethod
    def developer(cls) -> Scope:
        return cls(kind=ScopeKind.DEVELOPER)

    @classmethod
    def user(cls, user_id: int) -> Scope:
        return cls(kind=ScopeKind.USER, user_id=user_id)

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"kind": data}
        if isinstance(data, dict) and "variant" in data:
            fields = data.get("fields")
            if not isinstance(fields, list) or len(fields) != 1:
                msg = "the user scope must carry exactly one user id"
                raise ValueError(msg)
            return {"kind": data["variant"], "user_id": fields[0]}
        return data

    @model_validator(mode="after")
    def _check_payload(self) -> Scope:
        if self.kind is ScopeKind.USER and self.user_id is None:
            msg = "the user scope requires a user id"
            raise ValueError(msg)
        if self.kind is not ScopeKind.USER and self.user_id is not None:
            msg = f"the {self.kind.value} scope does not carry a user id"
            raise ValueError(msg)
        return self

    @model_serializer(mode="plain")
    def _to_wire(self) -> str | dict[str, Any]:
        if self.kind is ScopeKind.USER:
            return {"variant": self.kind.value, "fields": [self.user_id]}
        return self.kind.value

    def __str__(self) -> str:
        if self.kind is ScopeKind.USER:
            return f"User({self.user_id})"
        return self.kind.value


_SCOPE_LIST = TypeAdapter(list[Scope])


class TokenType(str, Enum):
    """Access token type."""

    BEARER = "Bearer"


class AccessTokenDTO(BaseModel):
    """Access token as returned by the ``token`` and ``login`` endpoints.

    ``scopes`` is itself a JSON document holding the encoded scope list and
    ``expiration`` is the lifetime of the token in seconds.
    """

    app_id: str
    access_token: str
    token_type: str
    scopes: str
    expiration: int


class AccessToken(BaseModel):
    """An authorization grant for calling the API."""

    model_config = ConfigDict(frozen=True)

    app_id: str
    scopes: tuple[Scope, ...]
    access_token: str = Field(repr=False)
    expiration: datetime

    @field_validator("scopes")
    @classmethod
    def _require_scopes(cls, scopes: tuple[Scope, ...]) -> tuple[Scope, ...]:
        if not scopes:
            msg = "there were no scopes in the access token"
            raise ValueError(msg)
        return scopes

    @field_validator("expiration")
    @classmethod
    def _aware_expiration(cls, expiration: datetime) -> datetime:
        if expiration.tzinfo is None:
            return expiration.replace(tzinfo=timezone.utc)
        return expiration

    @classmethod
    def from_data(
        cls,
        app_id: str,
        scopes: list[Scope] | tuple[Scope, ...],
        access_token: str,
        expiration: datetime,
    ) -> AccessToken:
        """Create an access token from stored data."""
        return cls(
            app_id=app_id,
            scopes=tuple(scopes),
            access_token=access_token,
            expiration=expiration,
        )

    @classmethod
    def from_dto(cls, dto: AccessTokenDTO) -> AccessToken:
        """Build a token from the server representation.

        Raises:
            FromDTOError: If the token type is not Bearer or the scopes are
                malformed or empty, or the lifetime is out of range.

        """
        if dto.token_type != TokenType.BEARER.value:
            msg = "the token type of the access token is not valid"
            raise FromDTOError(msg, {"token_type": dto.token_type})
        try:
            scopes = _SCOPE_LIST.validate_python(json.loads(dto.scopes))
        except (ValueError, ValidationError) as e:
            msg = "the scopes of the access token are not valid"
            raise FromDTOError(msg) from e
        if not scopes:
            msg = "there were no scopes in the access token"
            raise FromDTOError(msg)

        try:
            expiration = datetime.now(timezone.utc) + timedelta(seconds=dto.expiration)
        except OverflowError as e:
            msg = "the expiration of the access token is not valid"
            raise FromDTOError(msg, {"expiration": dto.expiration}) from e

        return cls(
            app_id=dto.app_id,
            scopes=tuple(scopes),
            access_token=dto.access_token,
            expiration=expiration,
        )

    def is_admin(self) -> bool:
        return any(s.kind is ScopeKind.ADMIN for s in self.scopes)

    def is_public(self) -> bool:
        return any(s.kind is ScopeKind.PUBLIC for s in self.scopes)

    def is_developer(self) -> bool:
        return any(s.kind is ScopeKind.DEVELOPER for s in self.scopes)

    def is_user(self, user_id: int) -> bool:
        """Whether the token belongs to exactly the given user."""
        return any(
            s.kind is ScopeKind.USER and s.user_id == user_id for s in self.scopes
        )

    def get_user_id(self) -> int | None:
        """Return the id of the first user scope, if any."""
        for scope in self.scopes:
            if scope.kind is ScopeKind.USER:
                return scope.user_id
        return None

    def has_expired(self) -> bool:
        return datetime.now(timezone.utc) >= self.expiration

    def authorization_header(self) -> str:
        """Value of the ``Authorization`` header for this token."""
        return f"Bearer {self.access_token}"
