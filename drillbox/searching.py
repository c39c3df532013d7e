"""Linear and binary search, and the largest element of a list."""


def linear_search(items, key):
    """Return the index of the first item equal to key, or None."""
    return next((index for index, item in enumerate(items) if item == key), None)


def binary_search(items, key):
    """Return an index of key in the ascending sequence items, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == key:
            return mid
        if value < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def largest(items):
    """Return the largest item; raise ValueError for an empty collection."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest() of an empty collection") from None
    for item in iterator:
        if item > best:
            best = item
    return best