# algobox

A toolbox of classic algorithms and data structures, written in plain Python
with no third-party dependencies.

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
| `algobox.sorting` | `merge_sort`, `bubble_sort`, `cocktail_sort`, `quick_sort`, `quick_sort_first_pivot`, `insertion_sort`, `selection_sort`, `heap_sort`, `radix_sort` (non-negative integers), `count_inversions`, `merge_sorted`, `quick_sort_timings` |
| `algobox.searching` | `binary_search` (index or `None`), `count_at_most` |
| `algobox.numbers` | `gcd`, `extended_gcd`, `modular_inverse`, `solve_diophantine`, `power_mod`, `power`, `factorize`, `prime_sieve`, `segmented_sieve`, `smallest_prime_factors`, `count_divisible_by_primes`, `big_factorial`, `add_big_numbers`, `count_digits`, `pyramid_blocks`, `distance`, `swap_without_temp`, `divisors` |
| `algobox.bits` | bit get/set/clear/update helpers, `count_set_bits`, `to_binary_digits`, `subsets`, `find_single`, `find_two_singles`, `longest_zero_run`, `numbers_with_longest_zero_run`, `checksum`, `verify_checksum` |
| `algobox.matrices` | `determinant`, `multiply`, `matrix_chain_order` returning a `MatrixChainResult` with `cost`, `costs`, `splits` and `parenthesization()` |
| `algobox.graphs` | `build_undirected`, `bfs_order`, `bfs_levels`, `dfs_order`, `connected_components`, `has_cycle`, `is_bipartite`, `topological_sort`, `bellman_ford` (raises `NegativeCycleError`), `kruskal`, `prim`, `lowest_common_ancestor`, `tree_diameter`, `subtree_sums` |
| `algobox.linked` | `LinkedList` with reversal, group reversal, rotation, cycle creation/detection/removal and intersection; `CircularList` |
| `algobox.containers` | `BoundedStack`, `CircularQueue`, `ArrayDeque`, raising `ContainerFullError` / `ContainerEmptyError` |
| `algobox.trees` | traversals (`preorder`, `inorder`, `postorder`, `level_order`), `sum_at_level`, `count_nodes`, `sum_nodes`, `height`, `diameter`, `tree_to_string`; `BinarySearchTree` |
| `algobox.expressions` | `evaluate_postfix`, `infix_to_postfix`, `is_balanced`, `is_palindrome`, `reverse_string`, `remove_k_duplicates`, `count_keys` |
| `algobox.arrays` | `four_sum`, `next_permutation`, `permutations`, `fractional_knapsack`, `closest_elements`, `missing_elements`, `maximum`, `swap_arrays`, `count_up` |
| `algobox.concurrency` | `DiningTable` and `simulate_dining`, `BoundedBuffer`, `factorial`, `sum_of_factorials`, `run_factorial_threads` |
| `algobox.billing` | `Item`, `Order`, `bill_totals`, `render_bill`, `save_invoice`, `load_invoices`, `find_invoices`; `Employee` and `highest_paid`; the `algobox-bill` command |

## Examples

```python
from algobox.sorting import merge_sort
from algobox.numbers import gcd, power_mod
from algobox.expressions import evaluate_postfix, is_balanced

merge_sort([12, 11, 13, 5, 6, 7])    # [5, 6, 7, 11, 12, 13]
gcd(12, 18)                          # 6
power_mod(2, 10, 1000)               # 24
evaluate_postfix("235*+")            # 17
is_balanced("[4-6]((8){(9-8)})")     # True
```

Graphs are described by edge lists, adjacency mappings or lists of
neighbour lists:

```python
from algobox.graphs import build_undirected, bfs_order

adjacency = build_undirected([(0, 1), (0, 2), (1, 3)])
bfs_order(adjacency, 0)              # [0, 1, 2, 3]
```

Containers raise exceptions when they are full or empty:

```python
from algobox.containers import BoundedStack, ContainerFullError

stack = BoundedStack(1)
stack.push(15)
try:
    stack.push(63)
except ContainerFullError:
    ...
```

## Command line

The package installs one command, `algobox-bill`, for restaurant invoices.
Invoices are kept as JSON lines in `invoices.jsonl` in the current directory,
or in the file given with `--file`.

```
algobox-bill new                 # prompt for a customer and items, print the bill, offer to save it
algobox-bill list                # print every saved invoice
algobox-bill search "Jane Doe"   # print the invoices of one customer
```

`search` exits with status 1 when the customer has no invoices. Bills apply a
10% discount and 9% CGST plus 9% SGST on the discounted total.

## What it does not do

Apart from `algobox-bill`, the package offers no commands: the algorithms are
library functions only, with no interactive menus or input prompts. The
billing command runs one action per invocation rather than a menu loop, and
invoices cannot be edited or deleted once saved.