"""
Fractal Global Credits Python SDK

Client library for the Fractal Global Credits REST API.
Provides typed access to token issuance, user accounts,
friend requests and credit transactions.
"""

from ._base import FRACTAL_DEV_SERVER, FRACTAL_SERVER
from ._oauth import SECRET_LEN
from .client import FractalClient
from .config import ClientSettings
from .exceptions import *
from .models import *

__version__ = "1.0.0"
__author__ = "Fractal Global"

__all__ = [
    "FractalClient",
    "ClientSettings",
    "FRACTAL_SERVER",
    "FRACTAL_DEV_SERVER",
    "SECRET_LEN",
    # Exceptions
    "FractalError",
    "NetworkError",
    "TimeoutError",
    "DecodeError",
    "FromDTOError",
    "AuthorizationError",
    "TokenExpiredError",
    "InvalidSecretError",
    "APIError",
    "UnauthorizedError",
    "BadRequestError",
    "NotFoundError",
    "ClientError",
    "ServerError",
    # Models
    "AccessToken",
    "Scope",
    "ScopeKind",
    "TokenType",
    "ClientInfo",
    "User",
    "Profile",
    "Address",
    "Confirmed",
    "Relationship",
    "PendingFriendRequest",
    "Transaction",
    "ResponseDTO",
]
