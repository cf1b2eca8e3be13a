"""Shared wire models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ResponseDTO(BaseModel):
    """Generic ``{message}`` envelope used for errors and some success bodies."""

    message: str


class EmailDTO(BaseModel):
    """Email address request model."""

    email: str


class Address(BaseModel):
    """Postal address model."""

    model_config = ConfigDict(frozen=True)

    address1: str
    address2: str | None = None
    city: str
    state: str
    zip: str
    country: str


class Confirmed(BaseModel, Generic[T]):
    """A user attribute together with whether it has been verified."""

    model_config = ConfigDict(frozen=True)

    value: T
    confirmed: bool = False
