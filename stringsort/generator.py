"""Random string workloads for sorting benchmarks."""

import random

MIN_STRING_LENGTH = 10
MAX_STRING_LENGTH = 200
ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!@#%:;^&*()-"
)


class StringGenerator:
    """Produce random strings and lists of them in several orders.

    With no seed the system's randomness is used. With a seed the output
    can be reproduced.
    """

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def random_string(self, length):
        """Return a string of ``length`` characters drawn from the alphabet."""
        return "".join(self._rng.choice(ALPHABET) for _ in range(length))

    def random_vector(self, length):
        """Return ``length`` random strings of 10 to 200 characters each."""
        return [
            self.random_string(
                self._rng.randint(MIN_STRING_LENGTH, MAX_STRING_LENGTH)
            )
            for _ in range(length)
        ]

    def reversed_vector(self, length):
        """Return random strings sorted in descending order."""
        return sorted(self.random_vector(length), reverse=True)

    def almost_sorted_vector(self, length):
        """Return sorted random strings with ``length // 2`` random swaps."""
        result = sorted(self.random_vector(length))
        for _ in range(length // 2):
            a = self._rng.randrange(length)
            b = self._rng.randrange(length)
            result[a], result[b] = result[b], result[a]
        return result