"""Transaction service for the Fractal API.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig
from .models import (
    AccessToken,
    GenerateTransactionDTO,
    Transaction,
    TransactionDTO,
)


class TransactionService:
    """Service for global credit transactions."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize transaction service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    def get_transaction(
        self,
        access_token: AccessToken,
        transaction_id: int,
    ) -> Transaction:
        """Get a transaction, if the token is allowed to see it.

        The server decides whether a user token is party to the transaction.
        """
        headers = self._client.authorize(
            access_token,
            access_token.is_admin() or access_token.get_user_id() is not None,
        )
        response = self._client.send_request(
            "GET", f"transaction/{transaction_id}", headers=headers
        )
        return Transaction.from_dto(self._client.decode(response, TransactionDTO))

    def new_transaction(
        self,
        access_token: AccessToken,
        receiver_wallet: str,
        receiver_id: int,
        amount: int,
    ) -> None:
        """Send credits from the token's user to another user.

        Args:
            access_token: Token of the sending user
            receiver_wallet: Wallet address receiving the credits
            receiver_id: ID of the receiving user
            amount: Amount in the smallest credit unit

        """
        origin_id = access_token.get_user_id()
        headers = self._client.authorize(access_token, origin_id is not None)
        dto = GenerateTransactionDTO(
            origin_id=origin_id,
            destination_address=receiver_wallet,
            destination_id=receiver_id,
            amount=amount,
        )
        self._client.send_request(
            "POST", "new_transaction", headers=headers, config=RequestConfig(json_data=dto)
        )

    def get_all_transactions(
        self,
        access_token: AccessToken,
        first_transaction: int,
    ) -> list[Transaction]:
        """Get every transaction since the given one (admin only)."""
        headers = self._client.authorize(access_token, access_token.is_admin())
        response = self._client.send_request(
            "GET", f"all_transactions/{first_transaction}", headers=headers
        )
        return [
            Transaction.from_dto(t)
            for t in self._client.decode_list(response, TransactionDTO)
        ]
