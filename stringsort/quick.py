"""Quick sort of strings: three-way on whole strings and ternary by character."""

import random

from .merge import compare_strings

_rng = random.Random(179)


def quick_sort(strings, cmp):
    """Return a new sorted list using three-way quick sort on whole strings."""
    strings = list(strings)
    if len(strings) <= 1:
        return strings
    pivot = strings[_rng.randrange(len(strings))]
    less, equal, great = [], [], []
    for text in strings:
        result = compare_strings(text, pivot, cmp)
        if result < 0:
            less.append(text)
        elif result > 0:
            great.append(text)
        else:
            equal.append(text)
    return quick_sort(less, cmp) + equal + quick_sort(great, cmp)


def ternary_quick_sort(strings, cmp, depth=0):
    """Return a new sorted list, partitioning on the character at ``depth``.

    All strings are assumed to share their first ``depth`` characters.
    Strings no longer than ``depth`` come first.
    """
    strings = list(strings)
    if len(strings) <= 1:
        return strings
    exhausted = [text for text in strings if len(text) <= depth]
    active = [text for text in strings if len(text) > depth]
    if not active:
        return exhausted
    pivot_char = active[_rng.randrange(len(active))][depth]
    less, equal, great = [], [], []
    for text in active:
        char = text[depth]
        if cmp(char, pivot_char) < 0:
            less.append(text)
        elif cmp(char, pivot_char) > 0:
            great.append(text)
        else:
            equal.append(text)
    less_sorted = ternary_quick_sort(less, cmp, depth)
    equal_sorted = ternary_quick_sort(equal, cmp, depth + 1)
    great_sorted = ternary_quick_sort(great, cmp, depth)
    return exhausted + less_sorted + equal_sorted + great_sorted