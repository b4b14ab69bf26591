"""
Unbounded multi-producer/single-consumer channel for search results.

- Producers hold `Sender` handles; `clone()` registers another producer.
- The stream ends once every sender handle has been closed and the queue
  is drained; `Receiver.recv` then raises `ChannelClosed`.
- Closing the receiver makes further sends fail silently (`send` returns False).
"""

import queue
import threading
from typing import Iterator

from lps.models import SearchResult


class ChannelClosed(Exception):
    """All senders are gone and no results are left."""


_END = object()


class _State:
    def __init__(self) -> None:
        self.queue: queue.Queue = queue.Queue()
        self.lock = threading.Lock()
        self.senders = 0
        self.receiver_open = True


class Sender:
    def __init__(self, state: _State) -> None:
        self._state = state
        self._closed = False
        with state.lock:
            state.senders += 1

    def clone(self) -> "Sender":
        if self._closed:
            raise RuntimeError("cannot clone a closed sender")
        return Sender(self._state)

    def send(self, result: SearchResult) -> bool:
        if self._closed:
            raise RuntimeError("send on a closed sender")
        if not self._state.receiver_open:
            return False
        self._state.queue.put(result)
        return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        with self._state.lock:
            self._state.senders -= 1
            last = self._state.senders == 0
        if last:
            self._state.queue.put(_END)

    def __enter__(self) -> "Sender":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Receiver:
    def __init__(self, state: _State) -> None:
        self._state = state
        self._finished = False

    def recv(self, timeout: float | None = None) -> SearchResult:
        """Block until the next result arrives.

        Raises ChannelClosed at end of stream, and queue.Empty if `timeout`
        expires first.
        """
        if self._finished:
            raise ChannelClosed()
        item = self._state.queue.get(timeout=timeout)
        if item is _END:
            self._finished = True
            raise ChannelClosed()
        return item

    def close(self) -> None:
        self._state.receiver_open = False

    def __iter__(self) -> Iterator[SearchResult]:
        while True:
            try:
                yield self.recv()
            except ChannelClosed:
                return


def open_channel() -> tuple[Sender, Receiver]:
    state = _State()
    return Sender(state), Receiver(state)
