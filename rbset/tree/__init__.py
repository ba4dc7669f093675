from .rbtree import RBTree, RBTreeNode, RED, BLACK
from .verify import verify
