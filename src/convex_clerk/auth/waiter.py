"""対話的サインインの完了待機。"""

from __future__ import annotations

import asyncio
import logging

from convex_clerk.auth.provider import IdentityProviderClient
from convex_clerk.errors import SignInTimeoutError
from convex_clerk.models import AuthEvent

logger = logging.getLogger(__name__)


class SignInWaiter:
    """サインイン完了イベントとタイムアウトを競争させる。

    先に決着した側が勝ち、負けた側は戻る前にキャンセルされる。
    イベント購読も戻る前に必ず解除する。
    """

    def __init__(self, client: IdentityProviderClient) -> None:
        self._client = client

    async def wait_for_completion(self, timeout: float) -> None:
        """サインインまたはサインアップの完了まで待機する。

        Args:
            timeout: 待機の上限秒数。

        Raises:
            SignInTimeoutError: 制限時間内に完了しなかった場合。
            ValueError: timeout が正でない場合。
        """

        if timeout <= 0:
            raise ValueError("timeout は正の値である必要があります")

        # 購読してから競争を始め、開始直後のイベントも取りこぼさない
        queue = await self._client.subscribe()
        try:
            # 購読が確立する前に完了したサインインはイベントでは観測できない
            if await self._client.current_user() is not None:
                logger.debug("Sign-in already completed before subscription")
                return
            await self._race(queue, timeout)
        finally:
            await self._client.unsubscribe(queue)

        logger.debug("Sign-in completion observed")

    async def _race(self, queue: asyncio.Queue[AuthEvent], timeout: float) -> None:
        listener = asyncio.create_task(self._listen(queue), name="sign-in-listener")
        timer = asyncio.create_task(self._expire(timeout), name="sign-in-timer")
        try:
            done, _ = await asyncio.wait({listener, timer}, return_when=asyncio.FIRST_COMPLETED)
            # 同時に決着した場合はイベント側を優先する
            winner = listener if listener in done else timer
            winner.result()
        finally:
            for task in (listener, timer):
                task.cancel()
            await asyncio.gather(listener, timer, return_exceptions=True)

    async def _listen(self, queue: asyncio.Queue[AuthEvent]) -> None:
        while True:
            event = await queue.get()
            if event.completes_sign_in:
                return
            # サインアウトや未知のイベントは無視して待機を続ける
            logger.debug(f"Ignoring auth event while waiting: {event.kind}")

    async def _expire(self, timeout: float) -> None:
        await asyncio.sleep(timeout)
        raise SignInTimeoutError(timeout)
