"""Most-significant-digit radix sort of ASCII strings."""

from .quick import ternary_quick_sort

ALPHABET_SIZE = 128
QUICK_SORT_THRESHOLD = 74


def _distribute(strings, depth):
    """Split strings into those ending before ``depth`` and per-character buckets."""
    exhausted = []
    buckets = [[] for _ in range(ALPHABET_SIZE)]
    for text in strings:
        if len(text) <= depth:
            exhausted.append(text)
            continue
        code = ord(text[depth])
        if code >= ALPHABET_SIZE:
            raise ValueError(
                f"character {text[depth]!r} is outside the "
                f"{ALPHABET_SIZE}-symbol alphabet"
            )
        buckets[code].append(text)
    return exhausted, [bucket for bucket in buckets if bucket]


def msd_radix_sort(strings, cmp, depth=0):
    """Return a new sorted list by bucketing on the character at ``depth``.

    Makes no character comparisons; ``cmp`` is accepted for a uniform
    signature.  Raises ValueError for characters outside ASCII.
    """
    strings = list(strings)
    if len(strings) <= 1:
        return strings
    result, buckets = _distribute(strings, depth)
    for bucket in buckets:
        result.extend(msd_radix_sort(bucket, cmp, depth + 1))
    return result


def msd_radix_quick_sort(strings, cmp, depth=0):
    """Radix sort that hands small groups over to ternary quick sort."""
    strings = list(strings)
    if len(strings) < QUICK_SORT_THRESHOLD:
        return ternary_quick_sort(strings, cmp, depth)
    result, buckets = _distribute(strings, depth)
    for bucket in buckets:
        result.extend(msd_radix_quick_sort(bucket, cmp, depth + 1))
    return result