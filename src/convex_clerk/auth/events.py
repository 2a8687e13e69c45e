"""
AuthEventEmitterの実装

IDプロバイダのライフサイクルイベントを購読者へ配信するエミッター。
購読ごとのキュー管理と、明示的な購読解除、バックプレッシャー制御を行う。
"""
import asyncio
import logging
from typing import List

from convex_clerk.models import AuthEvent

logger = logging.getLogger(__name__)


class AuthEventEmitter:
    """認証イベントエミッター"""

    def __init__(self, queue_maxsize: int = 100):
        """
        Args:
            queue_maxsize (int): 購読者ごとのキューの最大サイズ。これを超えると古いイベントから破棄される。
        """
        self._subscribers: List[asyncio.Queue] = []
        self._lock = asyncio.Lock()
        self._queue_maxsize = queue_maxsize

    @property
    def subscriber_count(self) -> int:
        """現在の購読者数"""
        return len(self._subscribers)

    async def subscribe(self) -> asyncio.Queue:
        """
        イベントを購読するためのキューを取得する。

        Returns:
            asyncio.Queue: イベントが配信されるキュー
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_maxsize)
        async with self._lock:
            self._subscribers.append(queue)

        logger.debug(f"New auth event subscriber (total={len(self._subscribers)})")
        return queue

    async def unsubscribe(self, queue: asyncio.Queue) -> None:
        """
        購読を解除する。未登録のキューは無視する。

        Args:
            queue (asyncio.Queue): 解除するキュー
        """
        async with self._lock:
            if queue in self._subscribers:
                self._subscribers.remove(queue)

        logger.debug(f"Auth event subscriber removed (total={len(self._subscribers)})")

    async def publish(self, event: AuthEvent) -> None:
        """
        全購読者にイベントを配信する。
        キューが満杯の場合は古いイベントを破棄する。

        Args:
            event (AuthEvent): 配信するイベント
        """
        async with self._lock:
            target_queues = list(self._subscribers)

        for q in target_queues:
            try:
                q.put_nowait(event)
            except asyncio.QueueFull:
                # Drop-Oldest
                try:
                    _ = q.get_nowait()
                    q.put_nowait(event)
                    logger.debug("Auth event queue full, dropped oldest event.")
                except (asyncio.QueueEmpty, asyncio.QueueFull):
                    pass
