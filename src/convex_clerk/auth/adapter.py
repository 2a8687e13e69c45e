"""IDプロバイダのセッションをバックエンドの認証契約へ橋渡しするアダプタ。"""

from __future__ import annotations

import logging
from datetime import timedelta

from convex_clerk.auth.base import AuthProvider
from convex_clerk.auth.fetcher import CredentialFetcher
from convex_clerk.auth.provider import IdentityProviderClient
from convex_clerk.auth.waiter import SignInWaiter
from convex_clerk.config import DEFAULT_SIGN_IN_TIMEOUT, DEFAULT_TEMPLATE_NAME, AdapterConfig
from convex_clerk.errors import NoActiveSessionError
from convex_clerk.models import Credentials

logger = logging.getLogger(__name__)


class AuthSessionAdapter(AuthProvider[Credentials]):
    """IDプロバイダ上でログイン/ログアウト/セッション復元を行う。

    設定以外の可変状態は持たず、ロックも取らない。
    同時に呼ばれた場合はそれぞれ独立して外部の状態に対して実行される。
    """

    def __init__(
        self,
        client: IdentityProviderClient,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        sign_in_timeout: float | timedelta = DEFAULT_SIGN_IN_TIMEOUT,
        config: AdapterConfig | None = None,
    ) -> None:
        """AuthSessionAdapterを初期化する。

        Args:
            client: IDプロバイダクライアント。
            template_name: JWTテンプレート名。
            sign_in_timeout: 対話的サインインの待機上限。
            config: 設定。指定時は template_name と sign_in_timeout より優先する。
        """

        self._config = config or AdapterConfig(
            template_name=template_name,
            sign_in_timeout=sign_in_timeout,
        )
        self._client = client
        self._fetcher = CredentialFetcher(client, self._config.template_name)
        self._waiter = SignInWaiter(client)

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def template_name(self) -> str:
        return self._config.template_name

    @property
    def sign_in_timeout(self) -> float:
        return self._config.sign_in_timeout

    async def login(self) -> Credentials:
        """ログインする。セッションがなければサインイン完了を待って再取得する。

        Raises:
            ProviderNotReadyError: IDプロバイダが初期化前の場合。
            NoActiveSessionError: サインイン完了後もセッションがない場合。
            TokenRetrievalFailedError: トークンを発行できなかった場合。
            SignInTimeoutError: サインインが制限時間内に完了しなかった場合。
        """

        try:
            return await self._fetcher.fetch()
        except NoActiveSessionError:
            logger.debug(f"No active session, waiting up to {self.sign_in_timeout}s for sign-in")

        await self._waiter.wait_for_completion(self.sign_in_timeout)
        # 再取得は1回のみ。結果は成否に関わらずそのまま返す
        return await self._fetcher.fetch()

    async def login_from_cache(self) -> Credentials:
        """既存セッションから認証情報を取得する。待機はしない。"""

        return await self._fetcher.fetch()

    async def logout(self) -> None:
        """IDプロバイダからサインアウトする。失敗はそのまま送出する。"""

        await self._client.sign_out()

    def extract_id_token(self, auth_result: Credentials) -> str:
        return auth_result.id_token

    extract_token = extract_id_token


def create_auth_provider(
    client: IdentityProviderClient,
    *,
    template_name: str = DEFAULT_TEMPLATE_NAME,
    sign_in_timeout: float | timedelta = DEFAULT_SIGN_IN_TIMEOUT,
) -> AuthProvider[Credentials]:
    """認証プロバイダを生成する。

    Args:
        client: IDプロバイダクライアント。
        template_name: JWTテンプレート名。
        sign_in_timeout: 対話的サインインの待機上限。

    Returns:
        認証プロバイダのインスタンス。

    Raises:
        pydantic.ValidationError: 設定値が不正な場合。
    """

    return AuthSessionAdapter(client, template_name=template_name, sign_in_timeout=sign_in_timeout)
