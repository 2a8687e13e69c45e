"""IDプロバイダクライアントのインターフェース。

アダプタが利用する外部SDKの操作を定義する。実体は呼び出し側から注入する。
"""

from __future__ import annotations

import asyncio
from typing import Optional, Protocol

from convex_clerk.models import AuthEvent


class IdentityUser(Protocol):
    """サインイン中のユーザー"""

    @property
    def id(self) -> str: ...


class IdentitySession(Protocol):
    """アクティブなセッション"""

    async def get_token(self, template: str) -> Optional[str]:
        """テンプレートに従ってトークンを発行する。

        Args:
            template: JWTテンプレート名

        Returns:
            発行されたトークン。発行できなかった場合はNone。
        """
        ...


class IdentityProviderClient(Protocol):
    """IDプロバイダクライアント"""

    async def is_loaded(self) -> bool:
        """SDKの初期化が完了しているかどうか"""
        ...

    async def current_user(self) -> Optional[IdentityUser]: ...

    async def current_session(self) -> Optional[IdentitySession]: ...

    async def sign_out(self) -> None: ...

    async def subscribe(self) -> asyncio.Queue[AuthEvent]:
        """ライフサイクルイベントを購読するキューを取得する。"""
        ...

    async def unsubscribe(self, queue: asyncio.Queue[AuthEvent]) -> None:
        """購読を解除する。"""
        ...
