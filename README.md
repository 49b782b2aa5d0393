# algokit

A small collection of classic algorithms and data structures. They are
plain Python functions and classes. Each one returns its result or yields
its results, and none of them prints.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `merge_sort`, `quick_sort_first_pivot`, `quick_sort_last_pivot`, `quick_sort`, `bubble_sort`, `binary_search` |
| `algokit.backtracking` | `format_grid`, `chess_squares`, `maze_paths`, `word_exists`, `place_knights`, `letter_permutations`, `queen_solutions` |
| `algokit.recursion` | `count_ones`, `digit_count`, `min_max`, `escape_ways`, `say_digits`, `subsequences`, `words_of_length`, `reverse_string`, `subset_sums` |
| `algokit.heap` | `left_child`, `right_child`, `parent`, `heap_height` |
| `algokit.hashing` | `ChainedHashTable`, a hash table of integer keys with separate chaining |
| `algokit.linked` | `NestedList`, `palindrome_digits`, `is_palindrome`, `largest_palindrome` |
| `algokit.graph` | `Graph` (a directed adjacency matrix with DFS and BFS), `looks_isomorphic` |
| `algokit.valuebox` | `ValueBox`, a value and size holder whose copies are independent |
| `algokit.cli` | `read_matrix`, `format_marks`, `main` |

### Sorting and searching

Every sort takes any iterable of comparable values. It returns a new list
and leaves the input unchanged. `binary_search(values, target)` returns an
index of `target` in a sorted sequence, or `None` if the target is not there.

```python
from algokit.sorting import merge_sort, quick_sort, binary_search

values = merge_sort([5, 3, 9, 1])
print(values)                        # [1, 3, 5, 9]
print(binary_search(values, 9))      # 3
print(quick_sort(["G", "C", "A"]))   # ['A', 'C', 'G']
```

### Backtracking

- `chess_squares(board)` gives the chess names of the cells marked `*`.
  Files are lettered from `A`, and ranks count down from the top row.
- `maze_paths(maze)` yields `(moves, visited_grid)` for every path through a
  square maze of 1s (open) and 0s. The moves are tried in the order
  `D`, `L`, `R`, `U`, then `X` (diagonal down-right).
- `word_exists(book, word)` tells whether the word can be traced through
  cells that are next to each other up, down, left or right.
- `place_knights(n)` returns a board holding ceil(n²/2) knights where no
  knight attacks another, or `None`.
- `letter_permutations(letters)` and `queen_solutions(n)` are generators.

```python
from algokit.backtracking import letter_permutations, queen_solutions

print(list(letter_permutations("ABC")))
# ['ABC', 'ACB', 'BAC', 'BCA', 'CAB', 'CBA']
print(len(list(queen_solutions(4))))   # 2
```

### Hash table

```python
from algokit.hashing import ChainedHashTable

table = ChainedHashTable(5)
for key in (10, 15, 7):
    table.insert(key)
print(table.search(15))   # 2 (1-based position in its chain)
print(table.delete(10))   # True
print(table.buckets())    # ((15,), (), (7,), (), ())
print(len(table), 7 in table)
print(table.format())
```

### Nested list and palindromes

`NestedList.add_nested` raises `KeyError` if no entry holds the key.
`converted()` builds a new list whose keys are the numbers spelled out by
each nested list.

```python
from algokit.linked import NestedList, largest_palindrome

print(largest_palindrome([1, 121, 12321, 35]))   # (12321, 5)
```

### Graph

```python
from algokit.graph import Graph

g = Graph(5)
g.add_edge(0, 1, 4)
g.add_edge(0, 2, 8)
g.add_edge(1, 3, 5)
print(g.dfs(0))           # [0, 1, 3, 2]
print(g.bfs(0))           # [0, 1, 2, 3]
print(g.out_degrees())    # [2, 1, 0, 0, 0]
```

`looks_isomorphic(first, second)` is a cheap test. It compares the vertex
counts, the edge counts and the sorted out-degrees, and nothing more. It is
not a full isomorphism check.

## Command line

The package installs one command, `algokit`, which has two subcommands:

```
algokit matrix ROWS COLS < numbers.txt
algokit marks
```

- `matrix` reads `ROWS × COLS` integers from standard input and prints them
  as a grid. If the input has too few numbers, or a token is not an integer,
  it writes an error to standard error and exits with status 1.
- `marks` prints a built-in sample table of names and marks.

`algokit.cli.main` can also be called from Python with an argument list,
for example `main(["marks"])`. It returns the exit status.

## What it does not do

The command line has no interactive prompts or menus. The searches, sorts,
hash table and graph are used from Python, not from the command.