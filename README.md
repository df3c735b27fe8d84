# algocraft

A collection of classic algorithms in plain Python, using only the standard
library.

## Installation

```
pip install algocraft
```

To run the test suite:

```
pip install "algocraft[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algocraft.exchange_sorts` | `is_sorted`, `bubble_sort`, `cocktail_shaker_sort`, `comb_sort`, `odd_even_sort`, `quick_sort`, `stooge_sort` |
| `algocraft.insertion_sorts` | `insertion_sort`, `selection_sort`, `heap_sort`, `shell_sort`, `merge_sort` |
| `algocraft.integer_sorts` | `counting_sort`, `generic_counting_sort`, `radix_sort` |
| `algocraft.searching` | `binary_search`, `binary_search_rec`, `linear_search` |
| `algocraft.number_theory` | `extended_euclidean_algorithm`, `sum_of_multiples_of_3_or_5_below_1000` |
| `algocraft.puzzles` | `hanoi`, `nqueens`, `format_board`, `main`, `NoSolutionError` |
| `algocraft.geometry` | `convex_hull_graham`, `closest_points` |
| `algocraft.clustering` | `kmeans` |
| `algocraft.shortest_paths` | `bellman_ford`, `dijkstra` |
| `algocraft.spanning_tree` | `add_undirected_edge`, `prim`, `prim_with_start` |
| `algocraft.pattern_search` | `knuth_morris_pratt`, `rabin_karp`, `pattern_hash` |
| `algocraft.text_transforms` | `burrows_wheeler_transform`, `inv_burrows_wheeler_transform`, `manacher`, `reverse` |

## Sorting

All sorts except `insertion_sort` sort a mutable sequence in place and return
`None`; `insertion_sort` takes any iterable and returns a new sorted list.

```python
from algocraft.exchange_sorts import quick_sort, is_sorted
from algocraft.insertion_sorts import insertion_sort

data = [6, 5, 4, 3, 2, 1]
quick_sort(data)
assert is_sorted(data)

insertion_sort(["d", "a", "c", "b"])   # ['a', 'b', 'c', 'd']
```

`counting_sort(items, maxval)` and `generic_counting_sort(items, maxval)` sort
integers in the range `0..=maxval` and raise `ValueError` for a value outside
it; `generic_counting_sort` accepts anything `operator.index` accepts and keeps
equal keys in their original order. `radix_sort` sorts non-negative integers
and raises `ValueError` on a negative one.

## Searching

```python
from algocraft.searching import binary_search, binary_search_rec, linear_search

binary_search(3, [1, 2, 3, 4])        # 2
binary_search(5, [1, 2, 3, 4])        # None
binary_search_rec([0, 10, 20], 20)    # 2  (left and right bound the slice searched)
linear_search(4, [1, 2, 3, 4])        # 3
```

## Number theory

```python
from algocraft.number_theory import extended_euclidean_algorithm

extended_euclidean_algorithm(101, 13)   # (1, 4, -31): gcd, s, t with 101*s + 13*t == 1
```

## Graphs

Graphs are dicts of dicts: `{vertex: {neighbour: weight}}`.

```python
from algocraft.shortest_paths import dijkstra, bellman_ford

graph = {0: {1: 2}, 1: {}}
dijkstra(graph, 0)       # {0: None, 1: (0, 2)}
bellman_ford(graph, 0)   # {0: None, 1: (0, 2)}
```

Each reachable vertex maps to `(predecessor, distance)`; the start maps to
`None`. `bellman_ford` accepts negative weights and returns `None` when a
negative loop is reachable from the start.

```python
from algocraft.spanning_tree import add_undirected_edge, prim

graph = {}
add_undirected_edge(graph, "a", "b", 6)
add_undirected_edge(graph, "a", "e", 2)
add_undirected_edge(graph, "b", "e", 5)
mst = prim(graph)   # grown from the smallest vertex, in the same dict-of-dicts shape
```

`prim_with_start(graph, start)` grows the tree from a chosen vertex and covers
only the component that holds it.

## Geometry and clustering

```python
from algocraft.geometry import convex_hull_graham, closest_points
from algocraft.clustering import kmeans

convex_hull_graham([(0, 0), (2, 0), (1, 1), (1, 3), (0, 2)])
closest_points([(0.0, 0.0), (1.0, 1.0), (3.0, 3.0)])   # ((0.0, 0.0), (1.0, 1.0))
kmeans([[-1.1], [-1.2], [1.1], [1.2]], 2)              # [0, 0, 1, 1]
```

The hull starts at the lowest point (lowest x on ties) and runs
counter-clockwise, keeping collinear hull points. `closest_points` returns
`None` for fewer than two points. `kmeans` picks evenly spaced data as its
starting centroids, so its result is deterministic; it raises `ValueError` if
`k` is below 1 or larger than the number of data.

## Strings

```python
from algocraft.pattern_search import knuth_morris_pratt, rabin_karp
from algocraft.text_transforms import (
    burrows_wheeler_transform,
    inv_burrows_wheeler_transform,
    manacher,
    reverse,
)

knuth_morris_pratt("abababa", "ab")   # [0, 2, 4]
rabin_karp("aaa", "a")                # [0, 1, 2]
manacher("babad")                     # "aba"
reverse("abc")                        # "cba"

encoded, index = burrows_wheeler_transform("CARROT")
inv_burrows_wheeler_transform(encoded, index)   # "CARROT"
```

## Puzzles

```python
from algocraft.puzzles import hanoi, nqueens, format_board

hanoi(2, 1, 3, 2)   # [(1, 2), (1, 3), (2, 3)]
nqueens(4)          # [1, 3, 0, 2]
print(format_board(nqueens(4)))
```

`nqueens` raises `NoSolutionError` for board widths with no solution (2 and 3)
and `ValueError` for widths below 1.

### From the command line

```
algocraft-nqueens 6
```

Takes the first non-zero integer argument as the board width, solves N-Queens
for it and prints the board. With no such argument, or a width below 4, it
uses an 8 by 8 board.