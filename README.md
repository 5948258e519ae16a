# dsalab

A small collection of classic data structures and algorithms, each in its own module, using only the standard library.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsalab.hashtable` | `ChainedHashTable` (separate chaining), `TelephoneBook` (linear probing), `TableFullError`, `string_hash`, `ascii_key` |
| `dsalab.avl` | `AVLTree`, `AVLNode`, and the helpers `insert`, `rotate_left`, `rotate_right`, `height`, `balance` |
| `dsalab.bst` | `BinarySearchTree` (minimum, membership, longest path, mirror) and a word/meaning `Dictionary` |
| `dsalab.graph` | Adjacency-matrix `Graph` with `bfs` / `dfs`, and a `TravelTimes` city-to-city table |
| `dsalab.sorting` | `heapify` and `heap_sort` |
| `dsalab.optimal_bst` | `optimal_bst` and `weight`; the result is an `OptimalBST` |
| `dsalab.students` | `Student` records in a fixed-size binary file managed by `StudentFile` |
| `dsalab.employees` | `Employee` records in a binary data file with a text index of offsets, managed by `EmployeeStore` |
| `dsalab.booktree` | `BookNode`: a book → chapters → sections → subsections tree |

## Examples

### Hash tables

```python
from dsalab.hashtable import ChainedHashTable, TelephoneBook

table = ChainedHashTable(10)
table.insert("apple", 5)
table.insert("banana", 10)
table.find("apple")      # 5
table.delete("banana")   # True
table.find("banana")     # raises KeyError

book = TelephoneBook(100)
book.create("alice", "ext-100")
book.search("alice")     # "ext-100"
book.update("alice", "ext-199")
list(book.records())     # [("alice", "ext-199")]
book.delete("alice")
```

`TelephoneBook.search`, `update` and `delete` raise `KeyError` for an unknown
name; `create` raises `TableFullError` when no slot is free.

### Trees

```python
from dsalab.avl import AVLTree
from dsalab.bst import BinarySearchTree, Dictionary

avl = AVLTree()
for key in (27, 39, 40, 55, 77, 99):
    avl.insert(key)
list(avl.inorder())      # [27, 39, 40, 55, 77, 99]
avl.height()

bst = BinarySearchTree()
for key in (50, 30, 70):
    bst.insert(key)
bst.minimum()            # 30
bst.contains(70)         # True
bst.longest_path()       # 2
bst.mirror()
list(bst.inorder())      # [70, 50, 30]

words = Dictionary()
words.insert("Great", "excellent or superior")
words.insert("Coding", "giving a computer a set of instructions")
list(words.items())      # alphabetical (word, meaning) pairs
```

### Graphs

```python
from dsalab.graph import Graph, TravelTimes

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
g.matrix()
g.bfs(0)   # neighbours visited in ascending order
g.dfs(0)   # highest-numbered neighbour first

times = TravelTimes(["Pune", "Mumbai"], [[0, 3], [3, 0]])
times.time("Pune", "Mumbai")   # 3
print(times.format_table())
```

### Sorting and optimal BSTs

```python
from dsalab.sorting import heap_sort
from dsalab.optimal_bst import optimal_bst

heap_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]

result = optimal_bst(
    [5, 15, 30, 45, 55, 65],
    [0, 0.1, 0.15, 0.2, 0.25, 0.1, 0.05],
    [0.05, 0.1, 0.15, 0.2, 0.3, 0.1, 0.1],
)
result.cost
result.root_key()
print(result.describe_tree())
```

### Record files

```python
from dsalab.students import Student, StudentFile
from dsalab.employees import Employee, EmployeeStore

students = StudentFile("stud.dat")
students.add(Student(name="asha", roll=1, div="A", address="pune"))
students.find(1)         # the Student, or None
list(students)
students.delete(1)       # number of records removed

store = EmployeeStore("data.txt", "index.txt")
store.add(Employee(emp_id=7, name="Ravi", designation="Engineer", salary=50000.0))
7 in store               # True
store.get(7)
store.delete(7)
```

Student names and addresses hold at most 9 bytes and `div` is one character;
employee names and designations hold at most 49 bytes. `EmployeeStore.add`
raises `ValueError` for a duplicate id and `StoreFullError` beyond 100
employees; `get` and `delete` raise `KeyError` for an unknown id.

### Book tree

```python
from dsalab.booktree import BookNode

book = BookNode("Algorithms")
chapter = book.add("Sorting")
section = chapter.add("Heaps")
section.add("Heapify")
print(book.describe())
```

Each node holds at most 10 children.

## What it does not do

The package is a library only. It has no command-line program and no
interactive menus: records, trees and graphs are built and queried by
calling the classes and functions above from Python.