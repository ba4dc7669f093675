__version__ = '0.3.0'

from .tree.rbtree import RBTree, RBTreeNode, RED, BLACK
from .tree.verify import verify, black_height
from .exception import (
        RBSetError,
        EmptyTreeError,
        InvalidReferenceError,
        TreeDestroyedError,
        CapacityError,
        InvariantError,
)
