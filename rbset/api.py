"""Function-style entry points mirroring the classic C interface.

    t = create()
    n = insert(t, 5)
    find(t, 5) is n
    erase(t, n)
    destroy(t)

Every function is a thin wrapper around the RBTree method of the same
purpose and raises the same exceptions.
"""

from .tree.rbtree import RBTree

def create():
    return RBTree()

def destroy(t):
    t.destroy()

def insert(t, key):
    return t.insert(key)

def find(t, key):
    return t.find(key)

def min(t):
    return t.minimum()

def max(t):
    return t.maximum()

def erase(t, node):
    return t.erase(node)

def export(t, buf, capacity=None):
    return t.export(buf, capacity)
