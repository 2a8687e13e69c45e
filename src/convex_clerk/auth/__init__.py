"""認証アダプタの公開API。"""

from __future__ import annotations

from convex_clerk.auth.adapter import AuthSessionAdapter, create_auth_provider
from convex_clerk.auth.base import AuthProvider
from convex_clerk.auth.events import AuthEventEmitter
from convex_clerk.auth.fetcher import CredentialFetcher
from convex_clerk.auth.provider import IdentityProviderClient, IdentitySession, IdentityUser
from convex_clerk.auth.waiter import SignInWaiter

__all__ = [
    "AuthEventEmitter",
    "AuthProvider",
    "AuthSessionAdapter",
    "CredentialFetcher",
    "IdentityProviderClient",
    "IdentitySession",
    "IdentityUser",
    "SignInWaiter",
    "create_auth_provider",
]
