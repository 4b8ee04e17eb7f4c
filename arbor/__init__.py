"""Binary trees, binary search trees, AVL trees, max binary heaps and a text renderer."""

__version__ = "0.1.0"
__all__ = ["tree", "printing", "bst", "avl", "heap"]