"""Bounded FIFO queues: a linear one whose slots are never reused, and a circular one."""

import argparse
from collections import deque


class QueueOverflow(Exception):
    """Raised when a value is enqueued into a full queue."""


class QueueUnderflow(Exception):
    """Raised when a value is dequeued from an empty queue."""


def _check_capacity(capacity):
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue:
    """A queue over a fixed row of slots that are used once each.

    Dequeuing frees no slot: once ``capacity`` values have been enqueued the
    queue stays full, even after it has been emptied.
    """

    def __init__(self, capacity=5):
        _check_capacity(capacity)
        self.capacity = capacity
        self._items = deque()
        self._slots_used = 0

    def enqueue(self, value):
        """Append value at the rear."""
        if self._slots_used == self.capacity:
            raise QueueOverflow("Queue Overflow")
        self._items.append(value)
        self._slots_used += 1

    def dequeue(self):
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items.popleft()

    def __iter__(self):
        return iter(list(self._items))

    def __len__(self):
        return len(self._items)


class CircularQueue:
    """A queue over a ring of slots; freed slots are reused."""

    def __init__(self, capacity=5):
        _check_capacity(capacity)
        self.capacity = capacity
        self._items = deque()

    def enqueue(self, value):
        """Append value at the rear."""
        if len(self._items) == self.capacity:
            raise QueueOverflow("Queue Overflow")
        self._items.append(value)

    def dequeue(self):
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items.popleft()

    def __iter__(self):
        return iter(list(self._items))

    def __len__(self):
        return len(self._items)


_MENU = "\n1.Enqueue\n2.Dequeue\n3.Display\n4.Exit\n"


def _read_int(prompt=""):
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None):
    """Run the interactive queue menu."""
    parser = argparse.ArgumentParser(prog="queue", description="Bounded queue menu.")
    parser.add_argument("--circular", action="store_true", help="reuse freed slots")
    parser.add_argument("--capacity", type=int, default=5, help="number of slots")
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be at least 1")
    queue = CircularQueue(args.capacity) if args.circular else LinearQueue(args.capacity)
    try:
        while True:
            print(_MENU, end="")
            choice = _read_int()
            if choice == 1:
                value = _read_int("Enter value: ")
                if value is None:
                    print("Invalid value")
                    continue
                try:
                    queue.enqueue(value)
                except QueueOverflow as exc:
                    print(exc)
                else:
                    print(f"{value} inserted")
            elif choice == 2:
                try:
                    print(f"{queue.dequeue()} removed")
                except QueueUnderflow as exc:
                    print(exc)
            elif choice == 3:
                if len(queue):
                    print("".join(f"{value} " for value in queue))
                else:
                    print("Queue is empty")
            elif choice == 4:
                return 0
            else:
                print("Invalid choice")
    except EOFError:
        return 0