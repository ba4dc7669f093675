from .. import log
from ..exception import (
        EmptyTreeError,
        CapacityError,
        TreeDestroyedError,
)

class BSTreeNode(object):
    """Abstract implementation of a binary search tree node."""

    def __init__(self, k, nil=None):
        self.key = k

        self.left = nil
        self.right = nil
        self.parent = nil
        self.tree = None

    def detach(self):
        """Drop every link into the tree this node belonged to."""
        self.left = None
        self.right = None
        self.parent = None
        self.tree = None

class BSTree(object):
    """Abstract implementation of a binary search tree.

    Subclasses provide size()."""

    def __init__(self, node_type=BSTreeNode):
        self.node_type = node_type
        self.nil = self.node_type(k=None)
        self.root = self.nil
        self.root.parent = self.nil
        self.destroyed = False

    def check_alive(self):
        """Raises TreeDestroyedError once destroy() has been called."""
        if self.destroyed:
            raise TreeDestroyedError

    def is_empty(self):
        self.check_alive()
        return self.root is self.nil

    def contains(self, k):
        return self.find(k) is not None


    def find(self, k):
        """Finds the node with key k. Returns None if k is not found.

        Duplicate keys descend to the right on insertion, so the node
        returned is the first equal one met on the way down.
        Time complexity: O(lg n) (balanced)"""
        self.check_alive()
        x = self.root
        while x is not self.nil and k != x.key:
            if k < x.key:
                x = x.left
            else:
                x = x.right
        return x if x is not self.nil else None


    def _inorder(self, f):
        """Does an inorder traversal and calls f(x) for every node x.

        Time complexity: O(n)
        """
        return self._inorder_recurse(self.root, f)

    def _inorder_recurse(self, x, f):
        if x is self.nil:
            return
        self._inorder_recurse(x.left, f)
        f(x)
        self._inorder_recurse(x.right, f)

    def export(self, buf, capacity=None):
        """Writes all keys in sorted order into buf, starting at index 0.

        buf must support item assignment for indices below capacity
        (a preallocated list, an array.array, ...). capacity defaults to
        len(buf). Raises CapacityError without touching buf if the tree
        holds more keys than capacity.

        Returns the number of keys written.
        Time complexity: O(n)"""
        self.check_alive()
        if capacity is None:
            capacity = len(buf)
        n = self.size()
        if n > capacity:
            raise CapacityError(capacity, n)
        index = 0
        def store(x):
            nonlocal index
            buf[index] = x.key
            index += 1
        self._inorder(store)
        return index

    def to_list(self):
        """Returns a new list holding all keys in sorted order.

        Time complexity: O(n)"""
        buf = [None] * self.size()
        self.export(buf)
        return buf

    def minimum(self, x=None):
        """Finds the node with the minimal key

        Raises EmptyTreeError if the tree is empty
        Time complexity: O(lg n) (balanced)"""
        self.check_alive()
        if x is None:
            x = self.root
        if x is self.nil:
            raise EmptyTreeError

        while x.left is not self.nil:
            x = x.left
        return x

    def maximum(self, x=None):
        """Finds the node with the maximum key

        Raises EmptyTreeError if the tree is empty
        Time complexity: O(lg n) (balanced)"""
        self.check_alive()
        if x is None:
            x = self.root
        if x is self.nil:
            raise EmptyTreeError

        while x.right is not self.nil:
            x = x.right
        return x

    def height(self):
        """Returns the number of nodes on the longest path from the root
        down to a leaf, 0 for an empty tree.

        Time complexity: O(n)"""
        self.check_alive()
        best = 0
        stack = [(self.root, 1)]
        while stack:
            x, depth = stack.pop()
            if x is self.nil:
                continue
            best = max(best, depth)
            stack.append((x.left, depth + 1))
            stack.append((x.right, depth + 1))
        return best

    def _release(self, x):
        x.detach()

    def clear(self):
        """Releases every node, leaving an empty tree.

        Post-order walk with an explicit stack, so arbitrarily deep trees
        do not hit the recursion limit.
        Returns the number of released nodes.
        Time complexity: O(n)"""
        self.check_alive()
        released = 0
        stack = []
        x = self.root
        last = self.nil
        while stack or x is not self.nil:
            if x is not self.nil:
                stack.append(x)
                x = x.left
                continue
            top = stack[-1]
            if top.right is not self.nil and top.right is not last:
                x = top.right
                continue
            stack.pop()
            self._release(top)
            released += 1
            last = top
        self.root = self.nil
        self.nil.parent = self.nil
        log.debug2("released ", released, " nodes")
        return released

    def destroy(self):
        """Releases every node and the sentinel. The tree can not be used
        afterwards.

        Time complexity: O(n)"""
        self.clear()
        self.nil.detach()
        self.destroyed = True
