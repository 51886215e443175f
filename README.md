# judgekit

Small solutions to classic online-judge problems, written as plain Python
functions. Each function takes ordinary Python values (ints, lists, tuples,
strings) and returns its answer. Invalid input, such as an out-of-range size
or a node number outside the graph, raises `ValueError`.

## Installation

```
pip install judgekit
pip install "judgekit[test]"   # with pytest for the test suite
```

The package has no runtime dependencies.

## Modules

### `judgekit.counting`

Counting recurrences over small tables. Several results are reduced modulo a
fixed number, and most functions accept only the input range their table
covers.

- `fibonacci(n)`: the n-th Fibonacci number (0 ≤ n ≤ 90).
- `fibonacci_calls(n)`: `(zeros, ones)`, how often a naive recursive
  Fibonacci reaches `fibonacci(0)` and `fibonacci(1)` (0 ≤ n ≤ 40).
- `bridge_count(west, east)`: ways to place `west` non-crossing bridges onto
  `east` sites (1 ≤ west ≤ east ≤ 30).
- `stair_numbers(n)`: n-digit numbers whose adjacent digits differ by one,
  modulo 10⁹.
- `tiling_count(n)`: tilings of a 2 × n board with 1×2, 2×1 and 2×2 tiles,
  modulo 10007.
- `zoo_arrangements(n)`: placements of lions in a 2 × n cage with none
  adjacent, modulo 9901.
- `binary_tiles(n)`: binary strings of length n built from `1` and `00`,
  modulo 15746.
- `pinary_numbers(n)`: n-digit binary numbers starting with 1 with no two
  adjacent 1s.
- `sum_of_123(n)`: ordered ways to write n as a sum of 1, 2 and 3.
- `padovan(n)`: the n-th Padovan spiral term (0 ≤ n ≤ 100).
- `min_ops_to_one(n)`: steps to reach 1 by dividing by 3, dividing by 2 or
  subtracting 1; a multiple of three is only ever divided by three.

### `judgekit.optimize`

Dynamic-programming maximisation and minimisation.

- `max_card_purchase(prices)`, `longest_increasing_subsequence(values)`,
  `min_paint_cost(costs)`, `knapsack(capacity, items)`,
  `max_subarray_sum(values)`, `triangle_max_path(rows)`,
  `max_wine(glasses)`, `max_stair_score(stairs)`.

### `judgekit.graphs`

Nodes are numbered from 1 to n.

- `reachability(matrix)`: transitive closure of a 0/1 adjacency matrix.
- `all_pairs_costs(n, edges)`: cheapest cost between every pair of nodes,
  with 0 where a node cannot be reached.
- `party_round_trip(n, edges, target)`: the longest round trip any node
  makes to `target` and back over one-way weighted edges.
- `dfs_order(n, edges, start)` and `bfs_order(n, edges, start)`: traversal
  orders of an undirected graph, smaller neighbours first.
- `kevin_bacon(n, links)`: the node with the smallest total distance to all
  others, ties going to the lowest number.

### `judgekit.grids`

- `longest_unique_path(board)`: most cells a path from the top-left corner
  covers without repeating a letter.
- `maze_shortest_path(maze)`: cells on the shortest path from the top-left to
  the bottom-right corner, both ends counted.
- `empty_regions(m, n, rectangles)`: sizes, ascending, of the uncovered
  regions of a sheet once the rectangles are drawn.
- `housing_complexes(grid)`: sizes, ascending, of connected groups of 1s.
- `ripening_days(box)`: days until every tomato ripens, or -1.

### `judgekit.greedy`

- `min_product_sum(a, b)`, `min_coins(coins, target)`, `sort_points(points)`,
  `sort_points_by_y(points)`, `heard_and_seen(heard, seen)`,
  `blackjack(cards, limit)`, `bulk_ranks(people)`, `total_wait_time(times)`,
  `max_passengers(stops)`.

### `judgekit.queues`

- `zero_sum(commands)`: sum left after each 0 cancels the latest number.
- `run_stack_commands(commands)`: runs `push X`, `pop`, `size`, `empty` and
  `top` on a stack and returns the printed values.
- `print_order(priorities, index)`: when the document at `index` is printed
  by a priority queue printer (counting from 1).
- `last_card(n)`: the card left after discard-and-move-to-bottom rounds.
- `is_balanced(text)`: whether a parenthesis string is properly nested.

### `judgekit.puzzles`

- `tournament_round(n, kim, lim)`, `matches_pattern(word)`,
  `chocolate_cuts(n, m)`, `find_equation(a, b, c)`,
  `above_average_percent(scores)`, `format_percent(value)`,
  `lotto_combinations(numbers)`, `compare(a, b)`.

## Example

```python
from judgekit.counting import fibonacci, padovan
from judgekit.graphs import bfs_order
from judgekit.queues import is_balanced
from judgekit.puzzles import format_percent

fibonacci(10)                                               # 55
padovan(12)                                                 # 16
bfs_order(4, [(1, 2), (1, 3), (1, 4), (2, 4), (3, 4)], 1)   # [1, 2, 3, 4]
is_balanced("(())()")                                       # True
format_percent(40.0)                                        # '40.000%'
```

## What it does not do

judgekit is a library only. It has no command-line program and does not read
problem input from standard input or print judge-formatted output; parsing
input and formatting results is left to the caller.

## Running the tests

```
pytest
```