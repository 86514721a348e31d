# gogu

A small library of collection helpers, function utilities and generic data
structures. It uses only the standard library.

## Installation

```
pip install gogu
```

The `test` extra installs pytest for running the test suite:

```
pip install "gogu[test]"
```

## What is inside

| Module            | Contents |
|-------------------|----------|
| `gogu.generic`    | `compare`, `equal`, `less` |
| `gogu.filters`    | `filter_items`, `reject`, `filter_map`, `filter_map_collection`, `filter_2d_map_collection` |
| `gogu.find`       | `find_index`, `find_last_index`, `find_all`, `find_min`, `find_min_by`, `find_min_by_key`, `find_max`, `find_max_by`, `find_max_by_key`, `nth`, `Bound` |
| `gogu.functions`  | `flip`, `delay`, `after`, `before`, `once`, `retry`, `retry_with_delay`, `RetryError`, `Debouncer`, `Throttle` |
| `gogu.bstree`     | `BsTree`, `Item`, `NodeNotFoundError`: a thread-safe binary search tree |
| `gogu.btree`      | `BTree`: a B-tree keeping keys in sorted order (not thread-safe) |
| `gogu.cache`      | `Cache`, `Item`, `CacheError`, `NO_EXPIRATION`, `DEFAULT_EXPIRATION`: an in-memory key/value store with expiration |
| `gogu.lrucache`   | `LRUCache`: a fixed-size least-recently-used cache |
| `gogu.heap`       | `Heap`, `HeapError`, `heap_sort`: a thread-safe binary heap with a custom comparator |
| `gogu.slist`      | `SList`, `SingleNode`, `ListError`: a singly linked list |
| `gogu.dlist`      | `DList`, `DoubleNode`: a doubly linked list |

Errors are raised as exceptions: `nth` raises `IndexError` for a position out
of range, `find_min_by_key` and `find_max_by_key` raise `KeyError` when the
first mapping lacks the key, `BTree.get` raises `KeyError` for a missing key,
and the data structures raise their own error classes listed above.

## Examples

Filtering and searching:

```python
from gogu.filters import filter_items, reject
from gogu.find import find_all, nth

filter_items([1, 2, 3, 10, 20], lambda v: v >= 10)   # [10, 20]
reject([1, 2, 3, 10, 20], lambda v: v < 10)          # [10, 20]
find_all([1, 2, 3, 2], lambda v: v == 2)             # {1: 2, 3: 2}
nth([1, 2, 3, 4], -2)                                # 3
```

A heap ordered by a comparator (`a < b` gives a min heap, `a > b` a max heap):

```python
from gogu.heap import Heap, heap_sort

heap = Heap(lambda a, b: a < b)
heap.push(2, 5, 1, 4, 3)
heap.pop()                                           # 1
heap.values()                                        # internal heap order

heap_sort([3, 1, 2], lambda a, b: a > b)             # [1, 2, 3]
```

A binary search tree:

```python
from gogu.bstree import BsTree

tree = BsTree(lambda a, b: a < b)
tree.upsert(10, "foo")
tree.upsert(-1, "baz")
[item.val for item in tree]                          # ["baz", "foo"]
tree.get(10).val                                     # "foo"
```

A B-tree:

```python
from gogu.btree import BTree

btree = BTree()
btree.put(2, "bar")
btree.put(-4, "qux")
list(btree)                                          # [(-4, "qux"), (2, "bar")]
```

An LRU cache; entry-returning methods give `(key, value, found)`:

```python
from gogu.lrucache import LRUCache

lru = LRUCache(2)
lru.add("a", 1)
lru.add("b", 2)
lru.add("c", 3)                                      # ("a", 1, True): "a" evicted
lru.get("b")                                         # (2, True)
```

An expiring cache; durations are in seconds, and a positive cleanup interval
starts a background thread that `close` stops:

```python
from gogu.cache import Cache, NO_EXPIRATION

with Cache(expiration=60, cleanup_interval=30) as cache:
    cache.set_default("foo", "bar")
    cache.set("pinned", "value", NO_EXPIRATION)
    cache.get("foo").val()                           # "bar"
```

Wrapping and repeating calls:

```python
from gogu.functions import Debouncer, once, retry

init = once(lambda: "ready")
init()                                               # "ready", computed once

def check(value):
    if value < 0:
        raise ValueError("negative")

retry(5, 3, check)                                   # 0 failed attempts

debounce = Debouncer(0.01)
for _ in range(100):
    debounce(lambda: print("fired once"))
```