# dsakit

Classic data structures and algorithms, each usable as a library and as a
small menu-driven program that reads its answers from standard input.
No third-party dependencies.

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.avl` | `AVLDictionary`: keyword/meaning dictionary kept balanced by AVL rotations |
| `dsakit.heap` | `build_min_heap`, `build_max_heap`: return a new list arranged as a heap |
| `dsakit.bst` | `BinarySearchTree`: unbalanced tree with height, minimum, mirror and traversals |
| `dsakit.dictionary` | `KeywordDictionary`: unbalanced keyword tree with search, update and delete |
| `dsakit.expression` | `ExpressionNode`, `build_from_prefix`, `inorder`, `postorder` |
| `dsakit.graph` | `CityGraph`: one-way roads with travel times, as matrix and adjacency list |
| `dsakit.mst` | `BranchNetwork`, `Connection`: minimum-cost connections by Prim's algorithm |
| `dsakit.obst` | `build_optimal_bst` returning an `OptimalBST` with its weight, cost and root tables |
| `dsakit.students` | `Student`, `StudentFile`: fixed-size records in a binary file, soft deletion |
| `dsakit.employees` | `Employee`, `EmployeeStore`: record file plus a separate (id, position) index file |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsakit.avl import AVLDictionary
from dsakit.heap import build_max_heap
from dsakit.expression import build_from_prefix, inorder, postorder

words = AVLDictionary()
words.insert("apple", "fruit")        # True
words.insert("apple", "other")        # False: existing entry is kept
words.insert("carrot", "vegetable")
print(words.inorder())                # [('apple', 'fruit'), ('carrot', 'vegetable')]
print(words.search("carrot"))         # SearchResult(meaning=..., comparisons=...)
print("apple" in words, len(words), words.height())

print(build_max_heap([12, 45, 7, 30]))

root = build_from_prefix("+a*bc")
print(inorder(root), postorder(root))
```

```python
from dsakit.mst import BranchNetwork

network = BranchNetwork(3)
network.connect(1, 2, 5)              # branches are numbered from 1
network.connect(2, 3, 3)
network.connect(1, 3, 9)
print(network.minimum_spanning_tree())
print(network.minimum_cost())         # 8
```

```python
from dsakit.obst import build_optimal_bst

tree = build_optimal_bst([10, 20, 30], [0.3, 0.2, 0.1], [0.1, 0.1, 0.1, 0.1])
print(tree.root_key(), tree.cost)
print(tree.describe())
```

Some behaviour worth knowing:

- Lookups that miss raise `KeyError` (`AVLDictionary.search`,
  `KeywordDictionary.search`/`update`/`delete`, `StudentFile.search`/`delete`,
  `EmployeeStore.update`/`delete`/`search`, `CityGraph.set_time` for unknown cities).
- `BinarySearchTree` sends equal values to the left; `KeywordDictionary` stores
  repeated keywords to the right. `BinarySearchTree.minimum()` raises
  `ValueError` on an empty tree, and `height()` counts nodes on the longest path.
- `CityGraph` accepts at most 20 uniquely named cities; a time of 0 means no road.
- `BranchNetwork.minimum_spanning_tree()` raises `ValueError` when some branch
  cannot be reached.
- `build_from_prefix` accepts letters and `+ - * /`; other characters are ignored.
- `StudentFile` and `EmployeeStore` write fixed-size binary records; names and
  addresses must be under 10 bytes, otherwise `ValueError` is raised. Deleted
  records stay in the file marked with id/roll `-1` and are skipped by `records()`.

## Interactive programs

Each module runs as a menu program:

```
dsakit-avl
dsakit-heap
dsakit-bst
dsakit-dictionary
dsakit-expression
dsakit-graph
dsakit-mst
dsakit-obst
dsakit-students [--file PATH]
dsakit-employees [--data PATH] [--index PATH]
```

`dsakit-students` keeps its records in `stud.dat` by default, and
`dsakit-employees` in `EMP.DAT` with its index in `IND.DAT`, both in the
current directory unless other paths are given.

## Limits

Only the student and employee programs keep anything on disk; the trees,
heaps, graphs and networks live in memory for the length of one run.