"""An unbalanced binary search tree of distinct values, with a menu-driven command."""

import argparse


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value):
        self.value = value
        self.left = None
        self.right = None


class BinarySearchTree:
    """A set of ordered values kept in a plain binary search tree.

    Inserting a value that is already present leaves the tree unchanged.
    Iteration yields the values in ascending order.
    """

    def __init__(self, values=()):
        self._root = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value):
        """Add value; return True if it was new, False if already present."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            self._size += 1
            return True
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new_node
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = new_node
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def __contains__(self, value):
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self):
        pending = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __len__(self):
        return self._size


_MENU = (
    "\n--- Binary Search Tree ---\n"
    "1. Insert\n"
    "2. Display (Inorder)\n"
    "3. Search\n"
    "4. Exit\n"
)


def _read_int(prompt):
    text = input(prompt)
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv=None):
    """Run the interactive tree menu; optional arguments are values to insert first."""
    parser = argparse.ArgumentParser(prog="bst", description="Binary search tree menu.")
    parser.add_argument("values", nargs="*", type=int, help="values to insert at start")
    args = parser.parse_args(argv)
    tree = BinarySearchTree(args.values)
    try:
        while True:
            print(_MENU, end="")
            choice = _read_int("Enter choice: ")
            if choice == 1:
                value = _read_int("Enter value: ")
                if value is None:
                    print("Invalid value!")
                else:
                    tree.insert(value)
            elif choice == 2:
                print("Inorder Traversal: " + "".join(f"{value} " for value in tree))
            elif choice == 3:
                value = _read_int("Enter value to search: ")
                if value is not None and value in tree:
                    print("Value found!")
                else:
                    print("Value not found!")
            elif choice == 4:
                print("Exiting...")
                return 0
            else:
                print("Invalid choice!")
    except EOFError:
        return 0