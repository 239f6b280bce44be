"""Change Notifier — in-process fan-out of "row changed" signals per profile id.

Invariants:
    - publish() never blocks and never raises
    - Each subscriber queue holds at most one pending signal: bursts of writes conflate
      into a single re-read
    - unsubscribe() is idempotent
"""

import asyncio
from collections import defaultdict


class ChangeNotifier:

    def __init__(self):
        self._subscribers: dict[int, set[asyncio.Queue]] = defaultdict(set)

    def subscribe(self, profile_id: int) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=1)
        self._subscribers[profile_id].add(queue)
        return queue

    def unsubscribe(self, profile_id: int, queue: asyncio.Queue) -> None:
        subscribers = self._subscribers.get(profile_id)
        if subscribers is None:
            return
        subscribers.discard(queue)
        if not subscribers:
            del self._subscribers[profile_id]

    def publish(self, profile_id: int) -> None:
        for queue in self._subscribers.get(profile_id, ()):
            if not queue.full():
                queue.put_nowait(profile_id)

    def subscriber_count(self, profile_id: int) -> int:
        return len(self._subscribers.get(profile_id, ()))
