"""Thread lessons: timed workers, a two-sender channel and shared sums."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import Empty, SimpleQueue
from typing import Sequence


def _timed_sleep(delay: float) -> int:
    start = time.monotonic()
    time.sleep(delay)
    return int((time.monotonic() - start) * 1000)


def run_timed_threads(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run count threads that each sleep; return each one's elapsed milliseconds."""
    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(_timed_sleep, [delay] * count))


@dataclass
class Queue:
    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel, delay: float = 1.0) -> list[threading.Thread]:
    """Send both halves of the queue into the channel from two threads."""

    def send(values: Sequence[int]) -> None:
        for value in values:
            channel.put(value)
            time.sleep(delay)

    senders = [
        threading.Thread(target=send, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for sender in senders:
        sender.start()
    return senders


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Collect every value sent for the queue, in the order received."""
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []
    while True:
        try:
            received.append(channel.get(timeout=0.05))
        except Empty:
            if not any(sender.is_alive() for sender in senders):
                break
    while True:
        try:
            received.append(channel.get_nowait())
        except Empty:
            break
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} values, expected {queue.length}"
        )
    return received


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum, per worker offset, the shared numbers congruent to that offset."""
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))