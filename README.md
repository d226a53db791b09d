# algokit

A small collection of classic algorithms, written in plain Python with no
third-party dependencies.

- `algokit.simple_sorts`: `bubble_sort`, `bubble_sort_last_swap` (a bubble
  sort that stops each pass where the last swap happened), `shaker_sort`,
  `insertion_sort`, `selection_sort`, `quick_sort` (middle-element pivot) and
  `random_pivot_quick_sort`.
- `algokit.heaps`: `sift_down` on a max-heap, `heap_sort` and `kth_smallest`.
- `algokit.merging`: `merge_sorted`, `merge_sort`, `count_inversions` and
  `kth_merge_write`.
- `algokit.stack`: `BoundedStack`, a stack with a fixed capacity, with
  `StackFullError` and `StackEmptyError`.
- `algokit.recursion`: `fibonacci`, `hanoi_moves` and `hanoi_move_count`.
- `algokit.search`: `bf_match`, brute-force substring search.
- `algokit.cli`: the `algokit` command.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using the library

The sorting functions take any iterable of mutually comparable items and
return a new ascending list; the input is left unchanged.

```python
from algokit.simple_sorts import quick_sort, insertion_sort, shaker_sort
from algokit.heaps import heap_sort, kth_smallest
from algokit.merging import merge_sorted, merge_sort, count_inversions, kth_merge_write
from algokit.recursion import fibonacci, hanoi_moves, hanoi_move_count
from algokit.search import bf_match

quick_sort([3, 1, 2])               # [1, 2, 3]
kth_smallest([5, 1, 4], 2)          # 4, since k counts from 1
merge_sorted([1, 3], [2, 4])        # [1, 2, 3, 4]
count_inversions([2, 1])            # 1
fibonacci(10)                       # 55
hanoi_move_count(3)                 # 7
list(hanoi_moves(2, 1, 3))          # [(1, 2), (1, 3), (2, 3)]
bf_match("abcabd", "abd")           # 3, or -1 when the pattern is absent
```

Some details:

- `kth_smallest(values, k)` raises `ValueError` when `k` is outside
  `1..len(values)`.
- `merge_sorted` keeps items from the first sequence ahead of equal items
  from the second.
- `kth_merge_write(values, k)` returns the value stored by the k-th write a
  merge sort makes, counting every merge step in order from 1; it raises
  `ValueError` when `k` is below 1 or the sort makes fewer than `k` writes.
- `sift_down(values, left, right)` works in place on a mutable sequence,
  restoring the max-heap property for `values[left:right + 1]`.
- `random_pivot_quick_sort(values, rng)` takes any object with a `randrange`
  method, such as a `random.Random` instance, so runs can be repeated with a
  fixed seed; with `rng=None` the `random` module is used.
- `fibonacci(n)` returns 1 for every `n <= 2`.
- `hanoi_moves(disks, source=1, target=3)` yields each move as a
  `(from_peg, to_peg)` pair; pegs are numbered 1 to 3. It raises `ValueError`
  for a negative number of disks, a peg outside 1 to 3, or equal source and
  target pegs.

### The bounded stack

```python
from algokit.stack import BoundedStack, StackFullError, StackEmptyError

stack = BoundedStack(10)            # 10 is also the default capacity
for value in (5, 4, 3, 2, 1):
    stack.push(value)

str(stack)          # "54321", the items bottom to top with no separator
stack.pop()         # 1
len(stack)          # 4
list(stack)         # [5, 4, 3, 2]
```

Pushing onto a full stack raises `StackFullError` (an `OverflowError`);
popping an empty one raises `StackEmptyError` (an `IndexError`). A negative
capacity raises `ValueError`.

## Command line

Installing the package provides an `algokit` command. Each subcommand reads
whitespace-separated input from standard input:

```
algokit --help
```

- `algokit sort`: reads a count followed by that many integers and prints
  them quicksorted, separated by spaces.
- `algokit inversions`: reads a count followed by that many integers and
  prints the number of inversions.
- `algokit hanoi`: reads a number of disks, prints the number of moves, then
  one move per line as two peg numbers, carrying the disks from peg 1 to
  peg 3.
- `algokit match`: reads a text and a pattern and prints
  `match at character N` (counting from 1) or `pattern not found in text`.
- `algokit stack`: reads nothing; pushes 5, 4, 3, 2 and 1 onto a stack,
  prints it, pops once and prints it again.

For example:

```
echo "5 3 1 4 5 2" | algokit sort
1 2 3 4 5
```

Malformed input, such as fewer integers than the count announces, is
reported as a usage error.

## What is not included

The package has no binomial-coefficient or Pascal's-triangle routines; for
those, `math.comb` in the standard library serves.