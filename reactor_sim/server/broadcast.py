"""
Snapshot Broadcaster

Best-effort fan-out of serialized snapshots to connected clients. Every
subscriber owns a single-slot queue; when the slot is still occupied the new
message is dropped for that subscriber instead of blocking the publisher.
"""

import asyncio
import logging
import threading
from typing import List

logger = logging.getLogger(__name__)


class Subscription:
    """One connected client's delivery slot"""

    def __init__(self):
        self.queue: "asyncio.Queue[str]" = asyncio.Queue(maxsize=1)
        self.dropped = 0

    def offer(self, message: str) -> bool:
        try:
            self.queue.put_nowait(message)
            return True
        except asyncio.QueueFull:
            self.dropped += 1
            return False

    async def receive(self) -> str:
        return await self.queue.get()


class Broadcaster:
    """Registry of subscriptions, guarded by its own lock"""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: List[Subscription] = []

    def subscribe(self) -> Subscription:
        subscription = Subscription()
        with self._lock:
            self._subscribers.append(subscription)
            count = len(self._subscribers)
        logger.info(f"Subscriber connected ({count} active)")
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            if subscription not in self._subscribers:
                return
            self._subscribers.remove(subscription)
            count = len(self._subscribers)
        logger.info(f"Subscriber disconnected ({count} active, {subscription.dropped} updates dropped)")

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, message: str) -> int:
        """
        Offer a message to every subscriber without waiting

        Must be called from the event loop that owns the subscriber queues.

        Args:
            message: Serialized snapshot

        Returns:
            Number of subscribers the message was delivered to
        """
        with self._lock:
            subscribers = list(self._subscribers)
        return sum(1 for subscription in subscribers if subscription.offer(message))
