"""Text rendering of a red-black tree.

    >>> print(format_tree(RBTree([10, 20, 30])))
    20 (B)
    ├── 10 (R)
    └── 30 (R)

Children are listed left first. A missing child is shown as `nil' when
its sibling exists, leaves show no children at all.
"""

from . import log
from .tree.rbtree import RED
from .util import key_to_str

def _label(node, colors):
    text = key_to_str(node.key)
    if node.color == RED:
        return colors.wrap(colors.RED_NODE, text + " (R)")
    return text + " (B)"

def tree_lines(tree, colors=None):
    """Returns the rendering of tree as a list of lines (no newlines).

    colors:    a log.ColorSchemeDefault, defaults to the current logger's
    """
    if colors is None:
        colors = log.logger.colors
    tree.check_alive()
    nil = tree.nil
    if tree.root is nil:
        return ["(empty)"]
    lines = []
    stack = [(tree.root, "", "")]
    while stack:
        node, lead, prefix = stack.pop()
        if node is nil:
            lines.append(lead + colors.wrap(colors.DECO, "nil"))
            continue
        lines.append(lead + _label(node, colors))
        if node.left is nil and node.right is nil:
            continue
        # pushed in reverse so the left child comes out first
        stack.append((node.right, prefix + "└── ", prefix + "    "))
        stack.append((node.left, prefix + "├── ", prefix + "│   "))
    return lines

def format_tree(tree, colors=None):
    return '\n'.join(tree_lines(tree, colors))
