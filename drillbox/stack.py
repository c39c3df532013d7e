"""A stack kept as a singly linked list of nodes."""


class StackUnderflow(Exception):
    """Raised when popping from an empty stack."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next_node):
        self.value = value
        self.next = next_node


class LinkedStack:
    """A LIFO stack; iteration runs from the top down.

    Built from an iterable, the last value given ends up on top.
    """

    def __init__(self, values=()):
        self._top = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value):
        """Put value on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflow("Stack Underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __iter__(self):
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self):
        return self._size

    def __str__(self):
        return "".join(f"{value} -> " for value in self) + "NULL"