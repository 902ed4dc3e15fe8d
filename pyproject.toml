[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gklib"
version = "0.1.0"
description = "General-purpose routines: quicksort, key/value sorting, priority queues, vector helpers, string utilities, tokenizing, timers, a 64-bit Mersenne Twister, PSSM reading and PageRank"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "priority queue",
    "quicksort",
    "pagerank",
    "tokenizer",
    "mersenne twister",
    "pssm",
    "csr",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gklib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
