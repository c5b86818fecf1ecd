class Node(object):
    # A node owns its left and right subtrees. O(1) to initialize.
    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right


class BinarySearchTree(object):
    # An unbalanced binary search tree holding unique, non-None values. Each bucket of a HashTable
    # is one of these. Initializes empty in O(1).
    def __init__(self):
        self._root = None
        self._size = 0

    # Builds a tree by inserting the given values in order. O(n*h) for n values and height h.
    @classmethod
    def from_values(cls, values):
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    # Read-only access to the root node for inspecting the shape of the tree. O(1)
    @property
    def root(self):
        return self._root

    # Number of nodes, tracked on every insert and remove. O(1)
    def size(self):
        return self._size

    def __len__(self):
        return self._size

    def __contains__(self, value):
        return self.contains(value)

    # Iterates the values in pre-order, the same order as to_array(). O(1) to create the iterator,
    # O(n) to exhaust it.
    def __iter__(self):
        return iter(self.to_array())

    # Returns True if value is in the tree. None is never in the tree. O(h)
    def contains(self, value):
        if value is None:
            return False
        current = self._root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False

    # Adds value as a new leaf. Returns False and leaves the tree unchanged for None or for a
    # value that compares equal to one already stored. O(h)
    def insert(self, value):
        if value is None:
            return False
        previous_size = self._size
        self._root = self._insert(value, self._root)
        return previous_size != self._size

    def _insert(self, value, node):
        if node is None:
            self._size += 1
            return Node(value)
        if value < node.value:
            node.left = self._insert(value, node.left)
        elif value > node.value:
            node.right = self._insert(value, node.right)
        return node

    # Removes value from the tree. A node with two children takes the value of its in-order
    # predecessor, which is then removed from the left subtree. Returns False if value is not
    # present. O(h)
    def remove(self, value):
        if value is None:
            return False
        previous_size = self._size
        self._root = self._remove(value, self._root)
        return previous_size != self._size

    def _remove(self, value, node):
        if node is None:
            return None
        if value < node.value:
            node.left = self._remove(value, node.left)
        elif value > node.value:
            node.right = self._remove(value, node.right)
        elif node.left is not None and node.right is not None:
            node.value = BinarySearchTree.find_max(node.left)
            node.left = BinarySearchTree.remove_max(node.left)
            self._size -= 1
        else:
            node = node.left if node.left is not None else node.right
            self._size -= 1
        return node

    # Returns the largest value of the subtree rooted at node, or None for an empty subtree. O(h)
    @staticmethod
    def find_max(node):
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    # Removes the largest value of the subtree rooted at node and returns the new subtree root. O(h)
    @staticmethod
    def remove_max(node):
        if node is None:
            return None
        if node.right is None:
            return node.left
        node.right = BinarySearchTree.remove_max(node.right)
        return node

    # The in-order predecessor of node's value within its own subtree: the maximum of its left
    # subtree. None when there is no left subtree. O(h)
    @staticmethod
    def find_predecessor(node):
        if node is None:
            return None
        return BinarySearchTree.find_max(node.left)

    # Height of the tree, where an empty tree is -1 and a single node is 0. O(n)
    def height(self):
        return self._height(self._root)

    def _height(self, node):
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    # Counts every node missing at least one child, so a node with a single child counts as a
    # leaf too. O(n)
    def num_leaves(self):
        return self._num_leaves(self._root)

    def _num_leaves(self, node):
        if node is None:
            return 0
        if node.left is None or node.right is None:
            return 1
        return self._num_leaves(node.left) + self._num_leaves(node.right)

    # Values in pre-order: root, then the left subtree, then the right subtree. HashTable replays
    # this order when rehashing. O(n)
    def to_array(self):
        values = []
        self._pre_order(self._root, values)
        return values

    def _pre_order(self, node, values):
        if node is None:
            return
        values.append(node.value)
        self._pre_order(node.left, values)
        self._pre_order(node.right, values)

    # Values in ascending order. O(n)
    def in_order(self):
        values = []
        self._in_order(self._root, values)
        return values

    def _in_order(self, node, values):
        if node is None:
            return
        self._in_order(node.left, values)
        values.append(node.value)
        self._in_order(node.right, values)

    # In-order values, each followed by one space: "112 310 330 440 ". Empty tree gives "". O(n)
    def __str__(self):
        return "".join(str(value) + " " for value in self.in_order())
