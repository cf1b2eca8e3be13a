"""Transaction models for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TransactionDTO(BaseModel):
    """Transaction as returned by the server."""

    id: int
    origin_user: int
    destination_user: int
    destination: str
    amount: int
    timestamp: datetime


class Transaction(BaseModel):
    """A global credit transaction.

    ``amount`` is expressed in the smallest credit unit and ``destination``
    is the wallet address that received it.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    origin_user: int
    destination_user: int
    destination: str
    amount: int
    timestamp: datetime

    @classmethod
    def from_dto(cls, dto: TransactionDTO) -> Transaction:
        return cls(**dto.model_dump())

    def to_dto(self) -> TransactionDTO:
        return TransactionDTO(**self.model_dump())


class GenerateTransactionDTO(BaseModel):
    """New transaction request model."""

    origin_id: int
    destination_address: str
    destination_id: int
    amount: int
