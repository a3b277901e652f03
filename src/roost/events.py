"""Change event bus — async broadcast of cell updates.

A ``ChangeBus`` attaches to one or more cells as a watch. Every install
on an attached cell becomes a ``ChangeEvent`` delivered to each active
subscriber.

Free-threading safety:
    - ChangeEvent is a frozen dataclass (immutable, safe to share)
    - ChangeBus uses a Lock to protect the subscriber set
    - Each subscriber owns its queue, fed through its own event loop with
      ``call_soon_threadsafe``, so cells may be updated from any thread

Usage::

    bus = ChangeBus()
    bus.attach(state)

    async with bus.subscribe() as changes:
        async for event in changes:
            print(event.cell, event.new)
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from roost.cell import Cell

logger = logging.getLogger("roost.events")

_QUEUE_SIZE = 256


@dataclass(frozen=True, slots=True)
class ChangeEvent:
    """One install on a cell.

    Attributes:
        cell: Name of the cell that changed (``CellConfig.name``).
        old: Value before the install.
        new: Value after the install.
    """

    cell: str
    old: Any
    new: Any


def _offer(queue: asyncio.Queue[ChangeEvent | None], event: ChangeEvent) -> None:
    try:
        queue.put_nowait(event)
    except asyncio.QueueFull:
        # Drop event for slow consumers rather than blocking
        logger.debug("dropping change event for a full subscriber queue")


def _stop(queue: asyncio.Queue[ChangeEvent | None]) -> None:
    # The stop signal always lands; a full queue loses its oldest event
    if queue.full():
        queue.get_nowait()
        logger.debug("dropping oldest change event to deliver the stop signal")
    queue.put_nowait(None)


class Subscription:
    """An active subscription. Async iterator and async context manager."""

    __slots__ = ("_bus", "_loop", "_queue")

    def __init__(self, bus: "ChangeBus", loop: asyncio.AbstractEventLoop) -> None:
        self._bus = bus
        self._loop = loop
        self._queue: asyncio.Queue[ChangeEvent | None] = asyncio.Queue(maxsize=_QUEUE_SIZE)

    def _deliver(self, event: ChangeEvent) -> None:
        # Loop already closed: the subscriber is gone
        with contextlib.suppress(RuntimeError):
            self._loop.call_soon_threadsafe(_offer, self._queue, event)

    def _end(self) -> None:
        with contextlib.suppress(RuntimeError):
            self._loop.call_soon_threadsafe(_stop, self._queue)

    def __aiter__(self) -> AsyncIterator[ChangeEvent]:
        return self

    async def __anext__(self) -> ChangeEvent:
        event = await self._queue.get()
        if event is None:
            self._bus._discard(self)
            raise StopAsyncIteration
        return event

    async def __aenter__(self) -> "Subscription":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Stop receiving events."""
        self._bus._discard(self)


class ChangeBus:
    """Broadcast channel for cell change events.

    ``subscribe()`` registers immediately, so no event emitted after it
    returns is missed.

    Ordering: events from one thread arrive in that thread's commit order.
    Watches run after the install and outside the cell's lock, so events
    from writers on different threads may arrive out of commit order;
    compare ``old``/``new`` rather than relying on arrival order there.
    """

    __slots__ = ("_lock", "_subscribers")

    def __init__(self) -> None:
        self._subscribers: set[Subscription] = set()
        self._lock = threading.Lock()

    def attach(self, cell: Cell[Any]) -> None:
        """Emit an event for every install on *cell*."""
        cell.add_watch(self, self._on_change)

    def detach(self, cell: Cell[Any]) -> None:
        """Stop watching *cell*."""
        cell.remove_watch(self)

    def _on_change(self, key: object, cell: Cell[Any], old: Any, new: Any) -> None:
        self.emit_sync(ChangeEvent(cell=cell.name, old=old, new=new))

    def emit_sync(self, event: ChangeEvent) -> None:
        """Broadcast *event* to all subscribers. Callable from any thread."""
        with self._lock:
            subscribers = set(self._subscribers)
        for subscription in subscribers:
            subscription._deliver(event)

    async def emit(self, event: ChangeEvent) -> None:
        """Broadcast *event* (async version)."""
        self.emit_sync(event)

    def subscribe(self) -> Subscription:
        """Register a subscriber bound to the running event loop."""
        subscription = Subscription(self, asyncio.get_running_loop())
        with self._lock:
            self._subscribers.add(subscription)
        return subscription

    def _discard(self, subscription: Subscription) -> None:
        with self._lock:
            self._subscribers.discard(subscription)

    def close(self) -> None:
        """Signal all subscribers to stop.

        Each subscription's iterator ends once it reaches the stop signal.
        A subscriber with a full queue loses its oldest pending event to
        make room, so every subscription ends.
        """
        with self._lock:
            subscribers = set(self._subscribers)
            self._subscribers.clear()
        for subscription in subscribers:
            subscription._end()
