"""
AuthEventEmitterのユニットテスト
"""
import asyncio
import unittest

from convex_clerk.auth.events import AuthEventEmitter
from convex_clerk.models import AuthEvent, AuthEventKind


class TestAuthEventEmitter(unittest.IsolatedAsyncioTestCase):
    """AuthEventEmitterのテストケース"""

    def setUp(self):
        self.emitter = AuthEventEmitter(queue_maxsize=3)

    async def test_subscribe_publish_receive(self):
        """正常系: 購読、配信、受信の確認"""
        queue = await self.emitter.subscribe()
        event = AuthEvent(AuthEventKind.SIGN_IN_COMPLETED, {"user_id": "u1"})

        await self.emitter.publish(event)

        self.assertIs(await queue.get(), event)

    async def test_multiple_subscribers(self):
        q1 = await self.emitter.subscribe()
        q2 = await self.emitter.subscribe()
        self.assertEqual(self.emitter.subscriber_count, 2)

        await self.emitter.publish(AuthEvent(AuthEventKind.SIGNED_OUT))

        self.assertEqual((await q1.get()).kind, AuthEventKind.SIGNED_OUT)
        self.assertEqual((await q2.get()).kind, AuthEventKind.SIGNED_OUT)

    async def test_unsubscribe(self):
        """購読解除後は配信されない"""
        queue = await self.emitter.subscribe()
        await self.emitter.unsubscribe(queue)
        self.assertEqual(self.emitter.subscriber_count, 0)

        await self.emitter.publish(AuthEvent(AuthEventKind.SIGN_IN_COMPLETED))
        self.assertTrue(queue.empty())

        # 二重解除は無視される
        await self.emitter.unsubscribe(queue)

    async def test_drop_oldest_when_full(self):
        """キューが満杯なら古いイベントから破棄する"""
        queue = await self.emitter.subscribe()
        for index in range(5):
            await self.emitter.publish(AuthEvent("custom", {"index": index}))

        self.assertEqual(queue.qsize(), 3)
        received = [queue.get_nowait().payload["index"] for _ in range(3)]
        self.assertEqual(received, [2, 3, 4])

    async def test_publish_without_subscribers(self):
        await self.emitter.publish(AuthEvent(AuthEventKind.SIGNED_OUT))
        self.assertEqual(self.emitter.subscriber_count, 0)


if __name__ == "__main__":
    unittest.main()
