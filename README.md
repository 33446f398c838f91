# algos

Classic algorithms and data structures in plain Python, using only the
standard library.

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
| `algos.sorting` | `merge_sort`, `radix_sort`, `selection_sort`, `bubble_sort`, `cocktail_sort`, `insertion_sort`, `quick_sort`, `quick_sort_first_pivot`, `heap_sort`, `count_inversions`, `merge_sorted`, `time_sort`, `benchmark_quick_sort` |
| `algos.searching` | `binary_search`, `count_at_most`, `largest` |
| `algos.numeric` | `power_mod`, `determinant`, `distance`, `factorial`, `factorial_digits`, `sum_of_factorials`, `matrix_multiply`, `sender_checksum`, `receiver_checksum`, `longest_zero_run`, `numbers_with_longest_zero_run`, `swap_values`, `count_up` |
| `algos.strings` | `is_balanced`, `is_palindrome`, `count_palindromic_substrings`, `reverse_string` |
| `algos.arrays` | `Item`, `four_sum`, `next_permutation`, `permutations`, `write_permutations`, `swap_arrays`, `count_keys`, `fractional_knapsack` |
| `algos.linked_lists` | `Node`, `LinkedList`, `CircularList`, `intersect`, `intersection_value` |
| `algos.deque` | `ArrayDeque`, `DequeOverflow`, `DequeUnderflow` |
| `algos.trees` | `TreeNode`, `preorder`, `inorder`, `postorder`, `level_order`, `tree_to_string`, `sum_at_level`, `count_nodes`, `sum_nodes`, `height`, `diameter`, `BinarySearchTree` |
| `algos.graphs` | `Graph`, `Edge`, `NegativeCycleError`, `bellman_ford`, `breadth_first`, `is_bipartite`, `topological_sort`, `kruskal`, `spanning_tree_cost`, `format_spanning_tree` |
| `algos.records` | `Employee`, `highest_paid`, `InvoiceItem`, `Invoice`, `BillTotals`, `compute_totals`, `format_invoice`, `InvoiceStore`, `main` |
| `algos.buffer` | `BoundedBuffer`, `BufferFull`, `BufferEmpty` |

The sorting functions return a new sorted list and leave their input alone.
`radix_sort` accepts only non-negative integers. `benchmark_quick_sort` times
`quick_sort_first_pivot` on ascending, random and descending input of each
given size and reports microseconds under `"best"`, `"average"` and `"worst"`.

## Examples

Sorting:

```python
from algos.sorting import merge_sort, count_inversions

merge_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
count_inversions([2, 1, 3])         # 1
```

Bracket matching:

```python
from algos.strings import is_balanced

is_balanced("[4-6]((8){(9-8)})")    # True
```

Topological order of a directed graph given as adjacency lists:

```python
from algos.graphs import topological_sort

adjacency = [[], [], [3], [1], [0, 1], [2, 0]]
topological_sort(adjacency)          # [4, 5, 2, 0, 3, 1]
```

`topological_sort` leaves out vertices that lie on or behind a cycle, so a
result shorter than the number of vertices means the graph is not acyclic.
`bellman_ford` raises `NegativeCycleError` when it finds a negative cycle.

A binary search tree:

```python
from algos.trees import BinarySearchTree

tree = BinarySearchTree()
for key in (50, 30, 70, 20, 40):
    tree.insert(key)

list(tree)              # [20, 30, 40, 50, 70]
40 in tree              # True
tree.minimum()          # 20
tree.successor(40)      # 50
```

A fixed-capacity circular deque:

```python
from algos.deque import ArrayDeque

dq = ArrayDeque(3)
dq.push_back(1)
dq.push_front(0)
dq.push_back(2)
list(dq)            # [0, 1, 2]
dq.is_full()        # True
```

Pushing onto a full deque raises `DequeOverflow`; popping from an empty one
raises `DequeUnderflow`. Likewise `BoundedBuffer.produce` raises `BufferFull`
and `BoundedBuffer.consume` raises `BufferEmpty`.

## Restaurant billing

The package installs an interactive invoicing command:

```
algos-bill
algos-bill --file my-invoices.txt
```

It shows a menu to generate an invoice, show every saved invoice, search
invoices by customer name, or exit. Invoices are appended to the file named
by `--file` (default `invoices.txt`), one JSON record per line. Each bill
applies a 10% discount to the subtotal and then 9% CGST and 9% SGST on the
net total. The same storage is available from Python through `InvoiceStore`:

```python
from algos.records import Invoice, InvoiceItem, InvoiceStore, format_invoice

store = InvoiceStore("invoices.txt")
store.save(Invoice("Asha", (InvoiceItem("Tea", 2, 15.0),)))
for invoice in store.find("Asha"):
    print(format_invoice(invoice))
```

## What it does not do

`algos-bill` is the only command. The other modules, including the employee
salary lookup (`highest_paid`), are library functions with no command-line
front end; they read no input and print nothing themselves.