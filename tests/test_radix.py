import random

import pytest

from stringsort.counting import CharComparator
from stringsort.quick import ternary_quick_sort
from stringsort.radix import (
    QUICK_SORT_THRESHOLD,
    msd_radix_quick_sort,
    msd_radix_sort,
)


def _random_strings(seed, count, alphabet, min_len, max_len):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(min_len, max_len)))
        for _ in range(count)
    ]


DATASETS = [
    [],
    ["only"],
    ["b", "a"],
    ["same", "same", "same"],
    ["a", "ac", "ab", "a", "abc", ""],
    _random_strings(41, 200, "ABCDEFabcdef0123!@#", 0, 15),
    _random_strings(42, 300, "ab", 0, 6),
    _random_strings(43, 150, "xyz", 5, 40),
    ["repeat"] * 100,
]


@pytest.mark.parametrize("strings", DATASETS)
def test_msd_radix_sort_sorts(strings):
    cmp = CharComparator()
    assert msd_radix_sort(strings, cmp) == sorted(strings)


@pytest.mark.parametrize("strings", DATASETS)
def test_msd_radix_quick_sort_sorts(strings):
    cmp = CharComparator()
    assert msd_radix_quick_sort(strings, cmp) == sorted(strings)


def test_msd_radix_sort_makes_no_comparisons():
    strings = _random_strings(51, 300, "abcdefgh", 1, 20)
    cmp = CharComparator()
    msd_radix_sort(strings, cmp)
    assert cmp.count == 0


def test_sorts_from_depth():
    suffixes = _random_strings(52, 200, "mnop", 0, 8)
    strings = ["key" + s for s in suffixes]
    cmp = CharComparator()
    assert msd_radix_sort(strings, cmp, 3) == sorted(strings)
    assert msd_radix_quick_sort(strings, cmp, 3) == sorted(strings)


def test_small_input_is_sorted_by_comparisons():
    strings = _random_strings(53, QUICK_SORT_THRESHOLD - 1, "abcdef", 2, 8)
    cmp = CharComparator()
    result = msd_radix_quick_sort(strings, cmp)
    assert result == sorted(strings)
    assert cmp.count >= len(strings)


def test_large_input_is_sorted_with_fewer_comparisons_than_ternary():
    strings = _random_strings(54, 600, "abcdefghij", 10, 30)
    hybrid = CharComparator()
    ternary = CharComparator()
    assert msd_radix_quick_sort(strings, hybrid) == ternary_quick_sort(strings, ternary)
    assert hybrid.count < ternary.count


def test_input_is_left_unchanged():
    strings = _random_strings(55, 100, "abc", 0, 5)
    original = list(strings)
    cmp = CharComparator()
    msd_radix_sort(strings, cmp)
    msd_radix_quick_sort(strings, cmp)
    assert strings == original


def test_msd_radix_sort_rejects_non_ascii():
    cmp = CharComparator()
    with pytest.raises(ValueError):
        msd_radix_sort(["abc", "\u00e9t\u00e9"], cmp)


def test_msd_radix_quick_sort_rejects_non_ascii_in_large_input():
    strings = _random_strings(56, QUICK_SORT_THRESHOLD + 10, "abc", 1, 5)
    strings.append("\u00fcber")
    cmp = CharComparator()
    with pytest.raises(ValueError):
        msd_radix_quick_sort(strings, cmp)