# aulalab

A set of small console exercises covering classic data structures and
algorithms. Every exercise is an interactive program that talks to you in
Spanish on the terminal, and every one of them is also a plain Python module
whose functions you can import and reuse. There are no third-party
dependencies.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The programs

| Command              | Module               | What it does |
|----------------------|----------------------|--------------|
| `aulalab-busqueda`   | `aulalab.busqueda`   | Fills a list with 999 random numbers between 0 and 2000, shows the first 20, sorts it with quicksort, shows the first 20 again and then lets you look numbers up with binary search (a match is any value within 0.0001). Accepts `--seed N` to make the random list reproducible. |
| `aulalab-ordenar`    | `aulalab.ordenar`    | Reads a count and that many integers, shows the list as entered and sorted with selection sort, and repeats while you answer `1`. |
| `aulalab-grafo`      | `aulalab.grafo`      | Builds a weighted undirected graph of four sites, runs Floyd–Warshall and prints, for every site reachable from `S` (node 0), the cost, the hop count and the route, followed by the largest hop count. Takes no input. |
| `aulalab-arbol`      | `aulalab.arbol`      | Loads the binary search tree 18, 11, 23, 7, 15, 20, 25, 13, prints its values in order and tells you the degree (number of children) of any non-negative integer you enter. |
| `aulalab-cuadro`     | `aulalab.cuadro`     | Reads an order `n` (odd, 1 to 9), prints the magic square, its magic sum and the numbers 1 to n² in placement order. |
| `aulalab-pedidos`    | `aulalab.pedidos`    | A burger-shop menu: option 1 takes an order (name with letters and spaces only, ID with digits only, burger letter A–E), option 2 lists pending orders, option 3 exits. |
| `aulalab-inventario` | `aulalab.inventario` | Reads the product quantities of two branches, then prints both lists, the two interleaved and their element-wise difference A − B. |

Each command reads from standard input, so you can also feed it a file:

```
aulalab-cuadro < entrada.txt
```

A command returns exit status 0 when it finishes normally and 1 when input
ends before it is done; `aulalab-cuadro` also returns 1 for an invalid order.

## Using the modules

The algorithms are available as ordinary functions and classes.

```python
from aulalab.busqueda import NumberList, quicksort, binary_search
from aulalab.ordenar import selection_sort
from aulalab.grafo import Graph, format_route, hop_counts, route
from aulalab.arbol import BinarySearchTree
from aulalab.cuadro import magic_square, magic_sum, format_square
from aulalab.inventario import interleave, subtract
from aulalab.pedidos import Order, OrderQueue, burger_for

values = quicksort([5.0, 1.5, 3.25])
binary_search(values, 3.25)          # True

selection_sort([3, 1, 2])            # [1, 2, 3]

graph = Graph(4)
graph.add_edge(0, 1, 9)
graph.add_edge(0, 2, 7)
graph.add_edge(1, 2, 2)
graph.add_edge(1, 3, 5)
graph.add_edge(2, 3, 2)
distances, routes = graph.floyd_warshall()
route(routes, 0, 3)                  # [0, 2, 3]
format_route(routes, 0, 3)           # "0 -> 2 -> 3"
hop_counts(routes, 0)                # hops from node 0 to every other node
graph.bfs(0), graph.dfs(0)           # traversal orders as lists

tree = BinarySearchTree([18, 11, 23, 7, 15, 20, 25, 13])
tree.in_order()                      # [7, 11, 13, 15, 18, 20, 23, 25]
tree.degree(11)                      # 2; a missing value raises KeyError

print(format_square(magic_square(3)))
magic_sum(3)                         # 15; magic_square raises ValueError for a bad order

interleave([1, 2, 3], [10])          # [1, 10, 2, 3]
subtract([5, 5], [1, 2, 3])          # [4, 3, -3]

queue = OrderQueue()
queue.enqueue(Order("Ana", "12345", burger_for("a")))
print(queue.describe())
```

`NumberList` wraps a list of floats with `insert`, `generate` (999 random
values, optionally from a given `random.Random`), `sort`, `contains` and
`sample`.

The interactive helpers (`prompt_number`, `ask_continue`, `prompt_int`,
`wants_to_continue`, `run_sort`, `read_int`, `fill_inventory` and
`take_order`) take a `read` callable that returns the next line of input and
a `write` callable that receives output text, so they can be driven from code
or tests as easily as from a terminal.

## What it does not do

- Orders in `aulalab-pedidos` live only in memory while the program runs;
  they are not saved anywhere, and there is no option to serve or remove an
  order from the queue.
- Inventories, lists and trees are likewise not stored between runs.
- The site graph used by `aulalab-grafo` is fixed; the command does not read
  a graph from input or a file.