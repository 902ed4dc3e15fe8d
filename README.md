# gklib

A collection of general-purpose routines with no third-party dependencies:
sorting, priority queues, vector helpers, string utilities, tokenizing,
timers, random numbers, reading protein profiles and PageRank.

## Modules

### `gklib.quicksort`

`quicksort(items, less)` sorts a mutable sequence in place. `less(a, b)` is
a strict "less than" predicate; afterwards no element is `less` than the one
before it.

### `gklib.sorting`

- `KeyValue(key, val)`: a dataclass whose ordering looks at `key` alone.
- `sort_increasing(items, key=None)` and `sort_decreasing(items, key=None)`
  sort in place, by `key(item)` when a key function is given, otherwise by
  the items themselves (a list of `KeyValue` sorts by its keys).

### `gklib.blas`

- `incset(n, baseval)`: `[baseval, ..., baseval + n - 1]`.
- `maximum(x)`, `minimum(x)`: the largest / smallest element, 0 when empty.
- `argmax(x)`, `argmin(x)`: index of the first largest / smallest element.
- `argmax_n(x, k)`: index of the element with the `k`-th largest value
  (1-based); raises `ValueError` when `k` is out of range.
- `total(x)`, `norm2(x)`, `dot(x, y)`: sum, Euclidean norm, dot product.
- `scale(x, alpha)` and `axpy(alpha, x, y)` modify their argument in place
  and return it. `dot` and `axpy` raise `ValueError` on unequal lengths.
- `array2csr(array, value_range)`: returns `(ptr, ind)` where
  `ind[ptr[v]:ptr[v + 1]]` lists the positions holding value `v`.

### `gklib.pqueue`

Both queues are max-priority: the largest key is at the top.

- `PriorityQueue(maxnodes)` holds integer nodes `0 .. maxnodes - 1`, each at
  most once. It offers `insert(node, key)`, `delete(node)`,
  `update(node, newkey)`, `get_top()` (raises `IndexError` when empty),
  `see_top_val()` and `see_top_key()` (return `None` when empty),
  `see_key(node)`, `reset()`, `check_heap()`, `len()` and `in`.
  Inserting a queued node raises `ValueError`; asking for a node that is not
  queued raises `KeyError`.
- `BoundedHeap(maxnodes)` holds arbitrary values. `insert(val, key)` returns
  `False` when the heap is full; it also has `get_top()`, `see_top_val()`,
  `see_top_key()`, `reset()`, `check_heap()` and `len()`.

### `gklib.tokenizer`

`tokenize(text, delimiters)` returns the runs of `text` that contain none of
the delimiter characters; consecutive delimiters give no empty tokens.

### `gklib.strings`

- `chr_replace(text, fromlist, tolist)`: character translation in the manner
  of `tr`; characters with no counterpart in `tolist` are deleted.
- `regex_replace(text, pattern, replacement, options="")`: Perl-style
  substitution. `$0`..`$9` in the replacement refer to the match and its
  groups, a backslash makes the next character literal, and `options` may
  contain `i` (ignore case) and `g` (every match). Returns
  `(new_text, number_of_substitutions)`; a bad pattern or replacement raises
  `ReplacementError`.
- `tprune(text, rmlist)`, `hprune(text, rmlist)`: strip trailing / leading
  characters found in `rmlist`.
- `case_equal(s1, s2)`: equality ignoring case.
- `rcmp(s1, s2)`: comparison as if both strings were reversed.
- `time2str(timestamp)` and `str2time(text)` convert to and from local
  `mm/dd/yyyy hh:mm:ss`; `str2time` returns 0 for times before the epoch.
- `get_string_id(strmap, key)`: the id whose name matches `key` ignoring
  case, from a mapping or an iterable of `(name, id)` pairs, or `None`.

### `gklib.timers`

`wclock_seconds()` and `cpu_seconds()` read the wall clock and the process
CPU time. `Timer(clock=wclock_seconds)` accumulates time over
`start()`/`stop()` intervals in `elapsed`, can be reset with `clear()`, and
works as a context manager.

### `gklib.rng`

`MersenneTwister64(seed=5489)` is a 64-bit Mersenne Twister giving
non-negative values: `randint64()`, `randint32()`, `rand_in_range(limit)`,
`seed(seed)`, and the in-place shuffles `array_permute(p, nshuffles)` and
`array_permute_fine(p)`.

### `gklib.seq`

- `Alphabet(symbols)`: `index(ch)` and `symbol(i)` map between symbols and
  positions.
- `Sequence`: a dataclass with `name`, `sequence`, `pssm`, `psfm` and
  `nsymbols`.
- `read_gkmod_pssm(path)`: reads a profile whose first line names the 20
  residue columns and whose other lines hold a position, a residue, 20 PSSM
  scores and 20 PSFM values. Malformed input raises `ValueError`.

### `gklib.pagerank`

`page_rank(rowptr, rowind, rowval, lamda, eps, max_niter, restart)` computes
personalised PageRank over a graph in CSR form and returns
`(scores, iterations)`.

## Example

```python
from gklib.pqueue import PriorityQueue
from gklib.tokenizer import tokenize

queue = PriorityQueue(10)
queue.insert(3, 5.0)
queue.insert(7, 9.0)
top = queue.get_top()  # 7, the node with the largest key

words = tokenize("  a, b ,c ", " ,")  # ["a", "b", "c"]
```

## What it does not do

This is a library only: it has no command-line program, and it does not read
or write sparse matrices or graphs from files.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```