"""A character comparator that counts how many times it is called."""


class CharComparator:
    """Compare two characters by code point and count every comparison.

    Calling the comparator returns a negative number, zero or a positive
    number, as the first character sorts before, equal to or after the
    second.  The number of calls made so far is kept in ``count``.
    """

    def __init__(self):
        self.count = 0

    def __call__(self, c1, c2):
        self.count += 1
        return ord(c1) - ord(c2)

    def reset(self):
        """Set the comparison count back to zero."""
        self.count = 0