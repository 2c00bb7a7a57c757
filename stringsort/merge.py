"""Merge sort of strings, plain and with longest-common-prefix tracking."""

from dataclasses import dataclass


def compare_strings(s1, s2, cmp):
    """Compare two strings character by character with ``cmp``.

    Returns a negative number, zero or a positive number.  When one string
    is a prefix of the other, the shorter one sorts first.
    """
    for c1, c2 in zip(s1, s2):
        result = cmp(c1, c2)
        if result != 0:
            return result
    return (len(s1) > len(s2)) - (len(s1) < len(s2))


def _merge_sort(strings, cmp):
    if len(strings) <= 1:
        return list(strings)
    middle = len(strings) // 2
    left = _merge_sort(strings[:middle], cmp)
    right = _merge_sort(strings[middle:], cmp)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare_strings(left[i], right[j], cmp) <= 0:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(strings, cmp):
    """Return a new list with ``strings`` sorted by a stable merge sort."""
    return _merge_sort(list(strings), cmp)


def lcp_compare(s1, s2, k, cmp):
    """Compare two strings known to share their first ``k`` characters.

    Returns ``(order, lcp)`` where ``order`` is -1 if ``s1`` sorts before or
    equal to ``s2`` and 1 otherwise, and ``lcp`` is the length of their
    longest common prefix.
    """
    i = k
    limit = min(len(s1), len(s2))
    while i < limit and cmp(s1[i], s2[i]) == 0:
        i += 1
    if i == len(s1):
        return -1, i
    if i == len(s2):
        return 1, i
    return (-1 if s1[i] < s2[i] else 1), i


@dataclass
class _Entry:
    text: str
    lcp: int = 0


def _lcp_merge_sort(entries, cmp):
    if len(entries) <= 1:
        return entries
    middle = len(entries) // 2
    left = _lcp_merge_sort(entries[:middle], cmp)
    right = _lcp_merge_sort(entries[middle:], cmp)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a.lcp > b.lcp:
            merged.append(a)
            i += 1
        elif a.lcp < b.lcp:
            merged.append(b)
            j += 1
        else:
            order, k = lcp_compare(a.text, b.text, a.lcp, cmp)
            if order < 0:
                merged.append(a)
                b.lcp = k
                i += 1
            else:
                merged.append(b)
                a.lcp = k
                j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def string_merge_sort(strings, cmp):
    """Return a new sorted list, skipping characters already known equal.

    Each string carries the length of its common prefix with the string
    output before it, so shared prefixes are not compared again.
    """
    entries = [_Entry(text) for text in strings]
    return [entry.text for entry in _lcp_merge_sort(entries, cmp)]