"""Small string exercises: anagrams, vowels and a star triangle."""

from collections import Counter

_VOWELS = frozenset("aeiou")


def is_anagram(first, second):
    """True when both strings hold the same characters the same number of times."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def count_vowels(text):
    """Count the vowels a, e, i, o, u in the text, ignoring case."""
    return sum(1 for char in text.lower() if char in _VOWELS)


def star_triangle(rows):
    """Return a left-aligned triangle of ``* `` cells, one more on each line."""
    return "".join("* " * row + "\n" for row in range(1, rows + 1))