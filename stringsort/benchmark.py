"""Time string sorting algorithms and count their character comparisons."""

import argparse
import csv
import time
from dataclasses import dataclass

from .counting import CharComparator
from .generator import StringGenerator
from .merge import merge_sort, string_merge_sort
from .quick import quick_sort, ternary_quick_sort
from .radix import msd_radix_quick_sort, msd_radix_sort

ALGORITHMS = dict(
    sorted(
        {
            "MergeSort": merge_sort,
            "QuickSort": quick_sort,
            "StringMergeSort": string_merge_sort,
            "TernaryQuickSort": ternary_quick_sort,
            "MsdRadixSort": msd_radix_sort,
            "MsdRadixQuickSort": msd_radix_quick_sort,
        }.items()
    )
)

VECTOR_TYPES = ("random", "reversed", "almost_sorted")

CSV_HEADER = ("vector_type", "size", "algorithm", "time_ns", "comparisons")


@dataclass(frozen=True)
class SortRun:
    """Outcome of one sort: elapsed time and character comparisons."""

    time_ns: int
    comparisons: int


class StringSortBenchmark:
    """Run every algorithm over growing prefixes of generated string lists."""

    def __init__(self, test_count=20, max_length=3000, step=100, generator=None):
        if test_count < 0:
            raise ValueError("test_count must not be negative")
        if step <= 0:
            raise ValueError("step must be positive")
        if max_length < 0:
            raise ValueError("max_length must not be negative")
        self.test_count = test_count
        self.max_length = max_length
        self.step = step
        self.generator = generator if generator is not None else StringGenerator()

    def run_sort(self, strings, sort):
        """Sort ``strings`` with ``sort`` and return a :class:`SortRun`."""
        cmp = CharComparator()
        start = time.perf_counter_ns()
        sort(strings, cmp)
        elapsed = time.perf_counter_ns() - start
        return SortRun(elapsed, cmp.count)

    def _generate(self, vector_type):
        makers = {
            "random": self.generator.random_vector,
            "reversed": self.generator.reversed_vector,
            "almost_sorted": self.generator.almost_sorted_vector,
        }
        try:
            make = makers[vector_type]
        except KeyError:
            raise ValueError(f"Unknown vector type: {vector_type}") from None
        return make(self.max_length)

    def run_to_csv(self, filename):
        """Run all benchmarks and write one CSV row per sort to ``filename``."""
        with open(filename, "w", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for vector_type in VECTOR_TYPES:
                for test_id in range(1, self.test_count + 1):
                    generated = self._generate(vector_type)
                    for size in range(self.step, self.max_length + 1, self.step):
                        print(
                            f"Testing {vector_type} vector of size {size} "
                            f"(test {test_id}/{self.test_count})"
                        )
                        subarray = generated[:size]
                        for name, sort in ALGORITHMS.items():
                            run = self.run_sort(subarray, sort)
                            writer.writerow(
                                (vector_type, size, name, run.time_ns, run.comparisons)
                            )


def main(argv=None):
    """Run the benchmark and write its results to a CSV file."""
    parser = argparse.ArgumentParser(
        description="Benchmark string sorting algorithms."
    )
    parser.add_argument("output", nargs="?", default="results.csv")
    parser.add_argument("--tests", type=int, default=20)
    parser.add_argument("--max-length", type=int, default=3000)
    parser.add_argument("--step", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        benchmark = StringSortBenchmark(
            test_count=args.tests,
            max_length=args.max_length,
            step=args.step,
            generator=StringGenerator(args.seed),
        )
    except ValueError as error:
        parser.error(str(error))
    benchmark.run_to_csv(args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())