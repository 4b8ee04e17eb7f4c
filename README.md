# arbor

Linked binary trees of integers in plain Python: general binary trees,
binary search trees, AVL trees and max binary heaps, plus a text renderer
for looking at them. There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building trees by hand

`arbor.tree.Node` is a node with a `value`, and `parent`, `left` and
`right` links.

```python
from arbor.tree import Node, lowest_common_ancestor, rotate_left

root = Node(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)

list(root.preorder())    # [98, 12, 54, 402]
list(root.levelorder())  # [98, 12, 402, 54]
root.height()            # 2
root.size()              # 4
root.is_full()           # False
lowest_common_ancestor(left.right, right) is root  # True
```

`insert_left` and `insert_right` put the new node between the node and its
existing child, which becomes the new node's child on the same side.

Traversals (`preorder`, `inorder`, `postorder`, `levelorder`) are
generators of values. Other measures and checks on a `Node`: `height`
(edges on the longest downward path, 0 for a leaf), `depth`, `size`,
`leaves`, `internal_nodes`, `balance`, `is_leaf`, `is_root`, `is_full`,
`is_perfect`, `is_complete`, `sibling` and `uncle`.

`lowest_common_ancestor(first, second)` returns the deepest shared ancestor,
or `None` if either node is `None` or they are in different trees.
`rotate_left` and `rotate_right` rotate a subtree and return its new root;
they raise `ValueError` when the needed child is missing, and leave the old
parent's child link for the caller to update.

## Printing

```python
from arbor.printing import render, print_tree

print(render(root), end="")
print_tree(root)  # writes to standard output unless a file is given
```

Each node is drawn as its value in parentheses, zero-padded to three
digits, with the links between levels drawn underneath the parent. An empty
tree renders as an empty string.

## Search trees, AVL trees and heaps

```python
from arbor.bst import BinarySearchTree, is_bst
from arbor.avl import AVLTree, is_avl, sorted_array_to_avl
from arbor.heap import MaxHeap, is_heap

bst = BinarySearchTree([98, 402, 12, 46, 128])
bst.search(46)      # the Node holding 46, or None
bst.remove(98)      # True
46 in bst           # True
list(bst)           # values in ascending order

avl = AVLTree([1, 2, 3, 4, 5])
avl.insert(6)
avl.remove(3)

balanced = sorted_array_to_avl([1, 2, 3, 4, 5, 6, 7])  # an AVLTree

heap = MaxHeap([5, 3, 9, 1])
heap.insert(7)
heap.extract()          # 9
heap.to_sorted_list()   # [7, 5, 3, 1], and the heap is now empty
```

`BinarySearchTree` and `AVLTree` ignore duplicate values: `insert` returns
`None` for a value already present. `remove` returns whether the value was
found. `AVLTree.insert` rotates on the way back up to keep the tree
balanced; `AVLTree.remove` removes as a search tree does and then
rebalances bottom-up.

`MaxHeap.extract` raises `IndexError` on an empty heap. Both `MaxHeap` and
the search trees support `len()`; each exposes its root `Node` as `root`.

`is_bst`, `is_avl` and `is_heap` check whether any `Node` tree satisfies
the corresponding ordering and shape rules; each returns `False` for an
empty tree.

## What it does not do

arbor is a library only: it has no command-line tool, and trees live in
memory with no way to save or load them.