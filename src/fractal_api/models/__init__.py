"""Fractal API models package.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from .common_models import Address, Confirmed, EmailDTO, ResponseDTO
from .token_models import (
    AccessToken,
    AccessTokenDTO,
    Scope,
    ScopeKind,
    TokenType,
)
from .client_models import ClientInfo, ClientInfoDTO, CreateClientDTO
from .user_models import (
    AuthenticationCodeDTO,
    LoginDTO,
    NewPasswordDTO,
    Profile,
    ProfileDTO,
    RegisterDTO,
    ResetPasswordDTO,
    UpdateUserDTO,
    User,
    UserDTO,
)
from .friend_models import (
    ConfirmFriendRequestDTO,
    FriendRequestDTO,
    PendingFriendRequest,
    PendingFriendRequestDTO,
    Relationship,
)
from .transaction_models import (
    GenerateTransactionDTO,
    Transaction,
    TransactionDTO,
)

__all__ = [
    # Common models
    "Address",
    "Confirmed",
    "EmailDTO",
    "ResponseDTO",
    # Token models
    "AccessToken",
    "AccessTokenDTO",
    "Scope",
    "ScopeKind",
    "TokenType",
    # Client models
    "ClientInfo",
    "ClientInfoDTO",
    "CreateClientDTO",
    # User models
    "AuthenticationCodeDTO",
    "LoginDTO",
    "NewPasswordDTO",
    "Profile",
    "ProfileDTO",
    "RegisterDTO",
    "ResetPasswordDTO",
    "UpdateUserDTO",
    "User",
    "UserDTO",
    # Friend models
    "ConfirmFriendRequestDTO",
    "FriendRequestDTO",
    "PendingFriendRequest",
    "PendingFriendRequestDTO",
    "Relationship",
    # Transaction models
    "GenerateTransactionDTO",
    "Transaction",
    "TransactionDTO",
]
