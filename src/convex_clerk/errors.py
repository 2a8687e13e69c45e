"""
エラー定義

認証アダプタで使用されるエラーコードと例外クラス
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """エラーコード

    - AUTH_xxx: 認証アダプタのエラー
    """
    AUTH_PROVIDER_NOT_READY = "AUTH_001"
    AUTH_NO_ACTIVE_SESSION = "AUTH_002"
    AUTH_TOKEN_RETRIEVAL_FAILED = "AUTH_003"
    AUTH_SIGN_IN_TIMEOUT = "AUTH_004"


@dataclass(frozen=True)
class AuthError:
    """認証エラー情報

    Attributes:
        code: エラーコード文字列
        message: エラーメッセージ
        details: 追加のエラー詳細情報
        recoverable: 呼び出し側で復旧可能かどうか
    """
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    recoverable: bool = False
    log_level: int = logging.ERROR


ERROR_CODE_LOG_LEVEL: Dict[ErrorCode, int] = {
    ErrorCode.AUTH_PROVIDER_NOT_READY: logging.ERROR,
    # 未サインインは通常の状態遷移
    ErrorCode.AUTH_NO_ACTIVE_SESSION: logging.INFO,
    ErrorCode.AUTH_TOKEN_RETRIEVAL_FAILED: logging.ERROR,
    ErrorCode.AUTH_SIGN_IN_TIMEOUT: logging.WARNING,
}


def create_auth_error(
    code: ErrorCode,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    recoverable: bool = True,
    log_level: Optional[int] = None,
) -> AuthError:
    """認証エラーを作成

    Args:
        code: エラーコード
        message: エラーメッセージ
        details: 追加詳細
        recoverable: 復旧可能かどうか

    Returns:
        AuthError: 認証エラー
    """
    return AuthError(
        code=code.value,
        message=message,
        details=details,
        recoverable=recoverable,
        log_level=log_level or ERROR_CODE_LOG_LEVEL.get(code, logging.ERROR),
    )


class ConvexClerkException(Exception):
    """認証アダプタ例外の基底クラス

    AuthErrorをラップする例外クラス
    """

    def __init__(self, error: AuthError):
        """ConvexClerkExceptionを初期化

        Args:
            error: AuthErrorインスタンス
        """
        self.error = error
        self.log_level = error.log_level
        super().__init__(f"[{error.code}] {error.message}")

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def recoverable(self) -> bool:
        return self.error.recoverable


class ProviderNotReadyError(ConvexClerkException):
    """IDプロバイダが初期化前に使用された"""

    def __init__(self) -> None:
        super().__init__(
            create_auth_error(
                ErrorCode.AUTH_PROVIDER_NOT_READY,
                "IDプロバイダが読み込まれていません。使用前にクライアントを初期化してください。",
            )
        )


class NoActiveSessionError(ConvexClerkException):
    """サインイン済みのユーザー/セッションが存在しない"""

    def __init__(self) -> None:
        super().__init__(
            create_auth_error(
                ErrorCode.AUTH_NO_ACTIVE_SESSION,
                "アクティブなセッションが見つかりません。",
            )
        )


class TokenRetrievalFailedError(ConvexClerkException):
    """セッションは存在するがトークンの発行に失敗した"""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(
            create_auth_error(
                ErrorCode.AUTH_TOKEN_RETRIEVAL_FAILED,
                f"トークンの取得に失敗しました: {reason}",
                details={"reason": reason},
                # テンプレート名の誤りなど設定起因であることが多い
                recoverable=False,
            )
        )


class SignInTimeoutError(ConvexClerkException):
    """対話的サインインが制限時間内に完了しなかった"""

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout
        details = {"timeout": timeout} if timeout is not None else None
        super().__init__(
            create_auth_error(
                ErrorCode.AUTH_SIGN_IN_TIMEOUT,
                "サインインの完了待機がタイムアウトしました。",
                details=details,
            )
        )
