"""Consistency checks for red-black trees.

verify() walks the whole tree and raises InvariantError on the first
broken property it meets. It is meant for tests and debugging, it is
not called by the tree itself.
"""

from .rbtree import RED, BLACK
from ..exception import InvariantError


def _fail(what, node):
    raise InvariantError(what, " at node ", repr(node))

def _check_sentinel(tree):
    nil = tree.nil
    if nil.color != BLACK:
        _fail("sentinel is not black", nil)
    if nil.key is not None:
        _fail("sentinel holds a key", nil)
    if nil.size != 0:
        _fail("sentinel has a non-zero size", nil)

def _check_node(tree, x):
    nil = tree.nil
    if x.tree is not tree:
        _fail("node is not owned by this tree", x)
    if x.color not in (RED, BLACK):
        _fail("invalid color " + repr(x.color), x)
    if x.color == RED and (x.left.color == RED or x.right.color == RED):
        _fail("red node has a red child", x)
    for child in (x.left, x.right):
        if child is not nil and child.parent is not x:
            _fail("broken parent reference of child " + repr(child), x)
    if x.size != 1 + x.left.size + x.right.size:
        _fail("wrong subtree size " + str(x.size), x)

def black_height(tree):
    """Returns the black-height of the tree, raising InvariantError if it
    differs between paths."""
    nil = tree.nil
    if tree.root is nil:
        return 0
    # post-order: heights[x] is the black-height below x
    heights = {}
    stack = [(tree.root, False)]
    while stack:
        x, expanded = stack.pop()
        if x is nil:
            continue
        if not expanded:
            stack.append((x, True))
            stack.append((x.right, False))
            stack.append((x.left, False))
            continue
        hl = 0 if x.left is nil else heights.pop(id(x.left))
        hr = 0 if x.right is nil else heights.pop(id(x.right))
        hl += 1 if x.left.color == BLACK else 0
        hr += 1 if x.right.color == BLACK else 0
        if hl != hr:
            _fail("black-height mismatch ({0:d} != {1:d})".format(hl, hr), x)
        heights[id(x)] = hl
    return heights[id(tree.root)]

def verify(tree):
    """Checks every red-black and bookkeeping invariant of tree.

    Returns the black-height of the root (the root itself excluded, the
    sentinel counted), 0 for an empty tree.
    """
    tree.check_alive()
    nil = tree.nil
    _check_sentinel(tree)
    if tree.root is nil:
        return 0
    if tree.root.color != BLACK:
        _fail("root is not black", tree.root)
    if tree.root.parent is not nil:
        _fail("root has a parent", tree.root)

    # iterative in-order walk, so corrupted deep trees can be checked too
    prev = None
    stack = []
    x = tree.root
    seen = 0
    while stack or x is not nil:
        while x is not nil:
            stack.append(x)
            x = x.left
            if len(stack) > tree.root.size:
                _fail("cycle detected", x)
        x = stack.pop()
        _check_node(tree, x)
        if prev is not None and x.key < prev.key:
            _fail("keys out of order after " + repr(prev), x)
        prev = x
        seen += 1
        x = x.right
    if seen != tree.root.size:
        _fail("root size {0:d} but {1:d} nodes reachable".format(
            tree.root.size, seen), tree.root)

    return black_height(tree)
