"""
データモデル定義

認証アダプタで受け渡す値オブジェクトとイベント
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

import jwt

from convex_clerk.errors import (
    ConvexClerkException,
    NoActiveSessionError,
    ProviderNotReadyError,
    SignInTimeoutError,
    TokenRetrievalFailedError,
)


def mask_secret(value: str) -> str:
    """トークンをマスクしてログ出力を避ける"""
    if not value:
        return "***"
    if len(value) <= 4:
        return "*" * len(value)
    return f"***{value[-4:]}"


@dataclass(frozen=True, slots=True)
class Credentials:
    """ログイン結果の認証情報

    毎回の取得で新しく生成され、変更されない。

    Attributes:
        user_id: IDプロバイダが割り当てたユーザーID
        id_token: バックエンドへ付与するベアラートークン
    """

    user_id: str
    id_token: str = field(repr=False)

    @property
    def masked_token(self) -> str:
        """マスク済みトークン"""
        return mask_secret(self.id_token)


class AuthEventKind(Enum):
    """IDプロバイダのライフサイクルイベント種別"""

    SIGN_IN_COMPLETED = "signInCompleted"
    SIGN_UP_COMPLETED = "signUpCompleted"
    SIGNED_OUT = "signedOut"


_KNOWN_EVENT_KINDS = frozenset(kind.value for kind in AuthEventKind)


@dataclass(frozen=True)
class AuthEvent:
    """IDプロバイダから通知されるイベント

    既知の種別名の文字列は AuthEventKind に正規化し、未知の種別は文字列のまま保持する。
    """

    kind: Union[AuthEventKind, str]
    payload: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.kind, str) and self.kind in _KNOWN_EVENT_KINDS:
            object.__setattr__(self, "kind", AuthEventKind(self.kind))

    @property
    def completes_sign_in(self) -> bool:
        """サインイン待機を完了させるイベントかどうか"""
        return self.kind in (
            AuthEventKind.SIGN_IN_COMPLETED,
            AuthEventKind.SIGN_UP_COMPLETED,
        )


class AuthState(Enum):
    """リアクティブクライアントが公開する認証状態"""

    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class AuthOutcome(Enum):
    """1回のログイン試行の分類"""

    SUCCESS = "success"
    NO_SESSION = "no_session"
    TOKEN_FAILURE = "token_failure"
    TIMEOUT = "timeout"
    PROVIDER_NOT_READY = "provider_not_ready"

    @classmethod
    def from_exception(cls, exc: ConvexClerkException) -> "AuthOutcome":
        """例外を分類に変換する

        Raises:
            TypeError: 認証アダプタの例外でない場合
        """
        for exc_type, outcome in _EXCEPTION_OUTCOMES.items():
            if isinstance(exc, exc_type):
                return outcome
        raise TypeError(f"分類できない例外です: {type(exc).__name__}")

    @property
    def auth_state(self) -> AuthState:
        if self is AuthOutcome.SUCCESS:
            return AuthState.AUTHENTICATED
        return AuthState.UNAUTHENTICATED


_EXCEPTION_OUTCOMES = {
    ProviderNotReadyError: AuthOutcome.PROVIDER_NOT_READY,
    NoActiveSessionError: AuthOutcome.NO_SESSION,
    TokenRetrievalFailedError: AuthOutcome.TOKEN_FAILURE,
    SignInTimeoutError: AuthOutcome.TIMEOUT,
}


def decode_claims(credentials: Credentials) -> Mapping[str, Any]:
    """トークンのペイロードを署名検証なしで読み取る

    検証はバックエンド側の責務であり、ここでは有効期限などの参照にのみ使う。

    Raises:
        TokenRetrievalFailedError: JWTとして解釈できない場合
    """
    try:
        return jwt.decode(
            credentials.id_token,
            options={"verify_signature": False, "verify_exp": False},
        )
    except jwt.DecodeError as exc:
        raise TokenRetrievalFailedError(f"token is not a decodable JWT: {exc}") from exc


def token_expires_at(credentials: Credentials) -> Optional[datetime]:
    """トークンの有効期限 (UTC) を返す。expクレームがなければNone"""
    exp = decode_claims(credentials).get("exp")
    if not isinstance(exp, (int, float)):
        return None
    return datetime.fromtimestamp(exp, tz=timezone.utc)
