# stringsort

String sorting algorithms that count every character comparison they make,
and a benchmark that times them on generated data and writes the results to
CSV. It has no dependencies outside the standard library.

## Counting comparisons

`stringsort.counting.CharComparator` is called with two characters. It
returns `ord(c1) - ord(c2)`, so the result is negative, zero or positive,
and it adds one to its `count` attribute on each call. `reset()` sets
`count` back to zero.

## Algorithms

Each sort takes an iterable of strings and a comparator and returns a new
sorted list. The input is not changed.

| Function | Module | What it does |
| --- | --- | --- |
| `merge_sort(strings, cmp)` | `stringsort.merge` | Stable top-down merge sort. Strings are compared character by character. |
| `string_merge_sort(strings, cmp)` | `stringsort.merge` | Merge sort in which each string carries the length of its common prefix with the string output before it. Characters already known to be equal are not compared again. |
| `quick_sort(strings, cmp)` | `stringsort.quick` | Three-way quicksort on whole strings. The pivot is chosen at random. |
| `ternary_quick_sort(strings, cmp, depth=0)` | `stringsort.quick` | Multikey (ternary) quicksort. It splits on the character at position `depth`, and strings no longer than `depth` come first. |
| `msd_radix_sort(strings, cmp, depth=0)` | `stringsort.radix` | Most-significant-digit radix sort with 128 buckets. It makes no character comparisons. `cmp` is accepted so that every sort has the same signature. |
| `msd_radix_quick_sort(strings, cmp, depth=0)` | `stringsort.radix` | MSD radix sort that passes groups of fewer than 74 strings to `ternary_quick_sort`. |

Two helper functions are also in `stringsort.merge`:

- `compare_strings(s1, s2, cmp)` returns a negative number, zero or a
  positive number. When one string is a prefix of the other, the shorter
  one sorts first.
- `lcp_compare(s1, s2, k, cmp)` compares two strings that are known to
  share their first `k` characters. It returns `(order, lcp)`: `order` is
  -1 when `s1` sorts before `s2` or equals it, and 1 otherwise. `lcp` is
  the length of their common prefix.

The radix sorts raise `ValueError` when a string has a character outside
the 128 ASCII characters at a position they bucket on.

The random pivots in `stringsort.quick` come from a generator with a fixed
seed. A fresh process therefore makes the same pivot choices each time.

```python
from stringsort.counting import CharComparator
from stringsort.quick import ternary_quick_sort

cmp = CharComparator()
print(ternary_quick_sort(["banana", "apple", "cherry"], cmp))  # ['apple', 'banana', 'cherry']
print(cmp.count)  # character comparisons made
cmp.reset()
```

## Test data

`stringsort.generator.StringGenerator(seed=None)` makes random data. With
no seed it uses fresh randomness. With a seed its output can be reproduced.

- `random_string(length)` returns a string of `length` characters. The
  characters are drawn from upper- and lower-case letters, digits and
  `!@#%:;^&*()-`.
- `random_vector(length)` returns `length` random strings, each 10 to 200
  characters long.
- `reversed_vector(length)` returns the same kind of list sorted in
  descending order.
- `almost_sorted_vector(length)` returns a sorted list in which
  `length // 2` random pairs of elements have been swapped.

## Benchmark

```
stringsort-bench [output] [--tests N] [--max-length N] [--step N] [--seed N]
```

The defaults are `results.csv`, 20 tests, a maximum length of 3000 and a
step of 100.

For each vector type (`random`, `reversed`, `almost_sorted`), the command
generates `--tests` lists of `--max-length` strings. Every algorithm then
sorts each prefix of size `step`, `2*step`, … up to the maximum length. A
progress line for each size goes to standard output. The results are
written to the CSV file with these columns:

```
vector_type,size,algorithm,time_ns,comparisons
```

Within each size the algorithms come in alphabetical order by name.
Options that are out of range end the command with a usage error: a
negative test count or maximum length, or a step that is not positive.

The same benchmark is available from Python through
`stringsort.benchmark.StringSortBenchmark(test_count=20, max_length=3000,
step=100, generator=None)`:

- `run_to_csv(filename)` writes the file.
- `run_sort(strings, sort)` times a single sort and returns a `SortRun`,
  which has `time_ns` and `comparisons`.

The benchmark only writes the raw measurements. It does not summarise,
average or plot them.

## Tests

```
pip install -e .[test]
pytest
```