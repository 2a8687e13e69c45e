"""
convex-clerk

IDプロバイダのセッションをバックエンドクライアントの認証契約へ橋渡しする
"""

from convex_clerk.auth import (
    AuthEventEmitter,
    AuthProvider,
    AuthSessionAdapter,
    CredentialFetcher,
    IdentityProviderClient,
    SignInWaiter,
    create_auth_provider,
)
from convex_clerk.config import AdapterConfig
from convex_clerk.errors import (
    ConvexClerkException,
    ErrorCode,
    NoActiveSessionError,
    ProviderNotReadyError,
    SignInTimeoutError,
    TokenRetrievalFailedError,
)
from convex_clerk.models import (
    AuthEvent,
    AuthEventKind,
    AuthOutcome,
    AuthState,
    Credentials,
    decode_claims,
    token_expires_at,
)

__version__ = "0.1.0"

__all__ = [
    "AdapterConfig",
    "AuthEvent",
    "AuthEventEmitter",
    "AuthEventKind",
    "AuthOutcome",
    "AuthProvider",
    "AuthSessionAdapter",
    "AuthState",
    "ConvexClerkException",
    "CredentialFetcher",
    "Credentials",
    "ErrorCode",
    "IdentityProviderClient",
    "NoActiveSessionError",
    "ProviderNotReadyError",
    "SignInTimeoutError",
    "SignInWaiter",
    "TokenRetrievalFailedError",
    "create_auth_provider",
    "decode_claims",
    "token_expires_at",
]
