"""T1Comercios API client with automatic credential renewal."""

from .config import T1Settings, load_settings
from .errors import ApiError, AuthError, T1Error
from .auth import AuthGateway, CredentialSet, CredentialStore, TokenBroker
from .api import T1Client, TransportClient

__version__ = "0.1.0"

__all__ = [
    "T1Settings",
    "load_settings",
    "T1Error",
    "AuthError",
    "ApiError",
    "CredentialSet",
    "CredentialStore",
    "AuthGateway",
    "TokenBroker",
    "TransportClient",
    "T1Client",
]
