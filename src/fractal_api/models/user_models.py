"""User management models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .common_models import Address, Confirmed


class UserDTO(BaseModel):
    """User as returned by the server."""

    id: int
    username: str
    email: str
    email_confirmed: bool
    first: str | None = None
    first_confirmed: bool = False
    last: str | None = None
    last_confirmed: bool = False
    device_count: int
    wallet_addresses: list[str]
    checking_balance: int
    cold_balance: int
    bonds: dict[datetime, int]
    birthday: date | None = None
    birthday_confirmed: bool = False
    phone: str | None = None
    phone_confirmed: bool = False
    image: str | None = None
    address: Address | None = None
    address_confirmed: bool = False
    sybil_score: int
    trust_score: int
    enabled: bool
    registered: datetime
    # The server spells this key "last_activty".
    last_activity: datetime = Field(
        validation_alias=AliasChoices("last_activty", "last_activity")
    )
    banned: datetime | None = None


class User(BaseModel):
    """All the personal information of a user."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    email: Confirmed[str]
    first: Confirmed[str] | None = None
    last: Confirmed[str] | None = None
    device_count: int
    wallet_addresses: frozenset[str]
    checking_balance: int
    cold_balance: int
    bonds: tuple[tuple[datetime, int], ...]
    birthday: Confirmed[date] | None = None
    phone: Confirmed[str] | None = None
    image: str | None = None
    address: Confirmed[Address] | None = None
    sybil_score: int
    trust_score: int
    enabled: bool
    registered: datetime
    last_activity: datetime
    banned: datetime | None = None

    @classmethod
    def from_dto(cls, dto: UserDTO) -> User:
        """Pair every verifiable attribute with its confirmation flag."""

        def confirmed(value: Any, flag: bool) -> dict[str, Any] | None:
            return None if value is None else {"value": value, "confirmed": flag}

        return cls(
            id=dto.id,
            username=dto.username,
            email=confirmed(dto.email, dto.email_confirmed),
            first=confirmed(dto.first, dto.first_confirmed),
            last=confirmed(dto.last, dto.last_confirmed),
            device_count=dto.device_count,
            wallet_addresses=frozenset(dto.wallet_addresses),
            checking_balance=dto.checking_balance,
            cold_balance=dto.cold_balance,
            bonds=tuple(sorted(dto.bonds.items())),
            birthday=confirmed(dto.birthday, dto.birthday_confirmed),
            phone=confirmed(dto.phone, dto.phone_confirmed),
            image=dto.image,
            address=confirmed(dto.address, dto.address_confirmed),
            sybil_score=dto.sybil_score,
            trust_score=dto.trust_score,
            enabled=dto.enabled,
            registered=dto.registered,
            last_activity=dto.last_activity,
            banned=dto.banned,
        )

    @property
    def is_banned(self) -> bool:
        return self.banned is not None and self.banned > datetime.now(self.banned.tzinfo)


class ProfileDTO(BaseModel):
    """Public profile of another user as returned by the server."""

    id: int
    username: str
    first: str | None = None
    last: str | None = None
    image: str | None = None
    age: int | None = None
    trust_score: int


class Profile(BaseModel):
    """Public profile of another user."""

    model_config = ConfigDict(frozen=True)

    id: int
    username: str
    first: str | None = None
    last: str | None = None
    image: str | None = None
    age: int | None = None
    trust_score: int

    @classmethod
    def from_dto(cls, dto: ProfileDTO) -> Profile:
        return cls(**dto.model_dump())

    @property
    def display_name(self) -> str:
        names = [n for n in (self.first, self.last) if n]
        return " ".join(names) if names else self.username


class RegisterDTO(BaseModel):
    """Registration request model."""

    username: str
    password: str
    email: str


class LoginDTO(BaseModel):
    """Login request model."""

    user_email: str
    password: str
    remember_me: bool = False


class ResetPasswordDTO(BaseModel):
    """Start password reset request model."""

    username: str
    email: str


class NewPasswordDTO(BaseModel):
    """Password reset confirmation model."""

    new_password: str


class UpdateUserDTO(BaseModel):
    """Partial user update; fields left as ``None`` are not changed."""

    new_username: str | None = None
    new_email: str | None = None
    new_first: str | None = None
    new_last: str | None = None
    old_password: str | None = None
    new_password: str | None = None
    new_phone: str | None = None
    new_birthday: date | None = None
    new_image: str | None = None
    new_address: Address | None = None


class AuthenticationCodeDTO(BaseModel):
    """Two factor authentication code model."""

    code: int
    timestamp: datetime
