"""認証プロバイダ基盤。

バックエンドクライアントが任意のID連携に要求する共通インターフェースを定義する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class AuthProvider(ABC, Generic[T]):
    """認証プロバイダの抽象基底クラス。

    ログイン、キャッシュからのログイン、ログアウト、トークン抽出の契約を表す。
    """

    @abstractmethod
    async def login(self) -> T:
        """必要であれば対話的サインインを待ってログインする。"""

    @abstractmethod
    async def login_from_cache(self) -> T:
        """既存セッションのみでログインする。待機はしない。"""

    @abstractmethod
    async def logout(self) -> None:
        """ログアウトする。"""

    @abstractmethod
    def extract_id_token(self, auth_result: T) -> str:
        """認証結果からバックエンドに渡すトークンを取り出す。"""
