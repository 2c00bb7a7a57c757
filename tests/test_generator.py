from collections import Counter

import pytest

from stringsort.generator import (
    ALPHABET,
    MAX_STRING_LENGTH,
    MIN_STRING_LENGTH,
    StringGenerator,
)


@pytest.mark.parametrize("length", [0, 1, 17, 250])
def test_random_string_length_and_alphabet(length):
    text = StringGenerator(seed=1).random_string(length)
    assert len(text) == length
    assert set(text) <= set(ALPHABET)


def test_random_vector_string_lengths():
    vector = StringGenerator(seed=2).random_vector(300)
    assert len(vector) == 300
    assert all(MIN_STRING_LENGTH <= len(s) <= MAX_STRING_LENGTH for s in vector)
    assert all(set(s) <= set(ALPHABET) for s in vector)


def test_same_seed_gives_same_output():
    first = StringGenerator(seed=42).random_vector(20)
    second = StringGenerator(seed=42).random_vector(20)
    assert first == second


def test_reversed_vector_is_descending():
    vector = StringGenerator(seed=3).reversed_vector(100)
    assert len(vector) == 100
    assert vector == sorted(vector, reverse=True)


def test_almost_sorted_is_permutation_of_sorted_draw():
    seed = 4
    vector = StringGenerator(seed=seed).almost_sorted_vector(100)
    drawn = StringGenerator(seed=seed).random_vector(100)
    assert Counter(vector) == Counter(drawn)


def test_almost_sorted_is_mostly_in_order():
    vector = StringGenerator(seed=5).almost_sorted_vector(200)
    in_order = sum(a <= b for a, b in zip(vector, vector[1:]))
    assert in_order > len(vector) // 4


def test_empty_vectors():
    generator = StringGenerator(seed=6)
    assert generator.random_vector(0) == []
    assert generator.reversed_vector(0) == []
    assert generator.almost_sorted_vector(0) == []