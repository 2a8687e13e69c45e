"""IDプロバイダの現在の状態から認証情報を取得する。"""

from __future__ import annotations

import logging

from convex_clerk.auth.provider import IdentityProviderClient
from convex_clerk.errors import (
    NoActiveSessionError,
    ProviderNotReadyError,
    TokenRetrievalFailedError,
)
from convex_clerk.models import Credentials

logger = logging.getLogger(__name__)


class CredentialFetcher:
    """現在のユーザーとセッションからトークンを取得する。

    リトライは行わない。リトライ方針は呼び出し側が決める。
    """

    def __init__(self, client: IdentityProviderClient, template_name: str) -> None:
        """CredentialFetcherを初期化する。

        Args:
            client: IDプロバイダクライアント。
            template_name: トークン発行に使うJWTテンプレート名。
        """

        self._client = client
        self._template_name = template_name

    async def _ensure_loaded(self) -> None:
        """IDプロバイダの初期化完了を確認する。

        Raises:
            ProviderNotReadyError: 初期化前の場合。
        """

        if not await self._client.is_loaded():
            raise ProviderNotReadyError()

    async def fetch(self) -> Credentials:
        """認証情報を取得する。

        Returns:
            Credentials: 新しく生成した認証情報。

        Raises:
            ProviderNotReadyError: IDプロバイダが初期化前の場合。
            NoActiveSessionError: ユーザーまたはセッションが存在しない場合。
            TokenRetrievalFailedError: トークンを発行できなかった場合。
        """

        await self._ensure_loaded()

        user = await self._client.current_user()
        if user is None:
            raise NoActiveSessionError()
        # ユーザーがいてもセッションがなければトークンは発行できない
        session = await self._client.current_session()
        if session is None:
            raise NoActiveSessionError()

        logger.debug(f"Requesting token with template '{self._template_name}'")
        try:
            token = await session.get_token(self._template_name)
        except Exception as exc:
            raise TokenRetrievalFailedError(str(exc) or type(exc).__name__) from exc

        if not token:
            raise TokenRetrievalFailedError(f"empty token for template {self._template_name}")

        return Credentials(user_id=user.id, id_token=token)
