"""String sorting algorithms that count character comparisons, a test-data generator and a CSV benchmark."""

__version__ = "0.1.0"