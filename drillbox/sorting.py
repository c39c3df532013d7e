"""Classic comparison sorts. Each returns a new ascending list."""

from heapq import merge


def bubble_sort(items):
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def merge_sort(items):
    """Sort stably by splitting in halves and merging the sorted halves."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return list(merge(merge_sort(result[:middle]), merge_sort(result[middle:])))


def quick_sort(items):
    """Quicksort with the middle element as pivot and two converging scans."""
    data = list(items)
    pending = [(0, len(data) - 1)] if len(data) > 1 else []
    while pending:
        low, high = pending.pop()
        i, j = low, high
        pivot = data[(low + high) // 2]
        while i <= j:
            while data[i] < pivot:
                i += 1
            while data[j] > pivot:
                j -= 1
            if i <= j:
                data[i], data[j] = data[j], data[i]
                i += 1
                j -= 1
        if low < j:
            pending.append((low, j))
        if i < high:
            pending.append((i, high))
    return data


def quick_sort_lomuto(items):
    """Quicksort with the last element as pivot (Lomuto partition)."""
    data = list(items)
    pending = [(0, len(data) - 1)] if len(data) > 1 else []
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = data[high]
        boundary = low
        for j in range(low, high):
            if data[j] < pivot:
                data[boundary], data[j] = data[j], data[boundary]
                boundary += 1
        data[boundary], data[high] = data[high], data[boundary]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return data