[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringsort"
version = "0.1.0"
description = "String sorting algorithms that count character comparisons, with a benchmark that writes CSV results"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "strings",
    "radix sort",
    "quicksort",
    "merge sort",
    "multikey quicksort",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stringsort-bench = "stringsort.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["stringsort"]

[tool.pytest.ini_options]
addopts = "-ra"
