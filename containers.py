from functools import total_ordering

from hashing import bucket_index, combine_hashes, default_hash
from trees import BinarySearchTree


class HashTable(object):
    # A hash table using separate chaining where every chain is a BinarySearchTree. Buckets are
    # None until a value is first added to them. Capacity and the hash function can be customized
    # at instantiation; the table grows by doubling once the load reaches LOAD_THRESHOLD percent.
    MIN_CAPACITY = 2
    LOAD_THRESHOLD = 80
    MAX_CAPACITY = 2 ** 31 - 1

    # O(n) to initialize the underlying list. A capacity below MIN_CAPACITY is raised to it and one
    # above max_capacity is lowered to it.
    def __init__(self, capacity=MIN_CAPACITY, hasher=default_hash, max_capacity=MAX_CAPACITY):
        if capacity < HashTable.MIN_CAPACITY:
            capacity = HashTable.MIN_CAPACITY
        if capacity > max_capacity:
            capacity = max_capacity
        self.hasher = hasher
        self.max_capacity = max_capacity
        self.storage = [None] * capacity
        self.count = 0

    # Allows len() function to take this object as an argument. O(1)
    def __len__(self):
        return self.count

    # Allows stored values to be iterated in for each loop, in the same order as to_array().
    # This method is O(1) though iteration itself is O(n + m) for m buckets.
    def __iter__(self):
        return HashTableIterator(self)

    # Allows use of the in keyword to test existence of a value in the hash table.
    def __contains__(self, value):
        return self.contains(value)

    # Number of values stored across all buckets. O(1)
    def size(self):
        return self.count

    # Length of the underlying list of buckets. O(1)
    def capacity(self):
        return len(self.storage)

    # Calculates the bucket index of a value for a given capacity. O(1) for numbers, O(k) for
    # strings of length k.
    def hash(self, value, capacity=None):
        if capacity is None:
            capacity = len(self.storage)
        return bucket_index(self.hasher(value), capacity)

    # Load of the table in percent if it held count values in capacity buckets. O(1)
    @staticmethod
    def load(count, capacity):
        return count * 100.0 / capacity

    # Returns True once the number of values stored reaches the load threshold. O(1)
    def is_full(self):
        return HashTable.load(self.count, len(self.storage)) >= HashTable.LOAD_THRESHOLD

    # Inserts value into the tree of its bucket, creating the tree if needed. Returns False for None
    # or a duplicate. After a successful insertion a full table is rehashed to twice its capacity.
    # O(h) for tree height h when resizing is not needed, which makes it O(h) amortized.
    def add(self, value):
        if value is None:
            return False
        if not self._place(self.storage, value):
            return False
        self.count += 1
        if self.is_full():
            self.rehash(len(self.storage) * 2)
        return True

    def _place(self, storage, value):
        index = self.hash(value, len(storage))
        if storage[index] is None:
            storage[index] = BinarySearchTree()
        return storage[index].insert(value)

    # Returns True if value is stored. Does not create a bucket. O(h)
    def contains(self, value):
        if value is None:
            return False
        tree = self.storage[self.hash(value)]
        return tree is not None and tree.contains(value)

    # Removes value from the tree of its bucket. The emptied tree stays in its bucket until the
    # next rehash. Returns False if value is not stored. O(h)
    def remove(self, value):
        if value is None:
            return False
        tree = self.storage[self.hash(value)]
        if tree is not None and tree.remove(value):
            self.count -= 1
            return True
        return False

    # Rebuilds the table with new_capacity buckets, growing or shrinking it. If the load would be at
    # or above the threshold, new_capacity is doubled until it is not. Returns False, leaving the
    # table untouched, when new_capacity is below MIN_CAPACITY or would have to pass max_capacity.
    # Buckets are replayed in ascending index order and each tree in pre-order. Runs in O(n + m)
    # for n values and m buckets.
    def rehash(self, new_capacity):
        if new_capacity < HashTable.MIN_CAPACITY or new_capacity > self.max_capacity:
            return False
        while HashTable.load(self.count, new_capacity) >= HashTable.LOAD_THRESHOLD:
            if new_capacity > self.max_capacity // 2:
                return False
            new_capacity *= 2

        new_storage = [None] * new_capacity
        for value in self:
            self._place(new_storage, value)
        self.storage = new_storage
        return True

    # List of all values, by ascending bucket index and in pre-order within a bucket. O(n + m)
    def to_array(self):
        return list(self)

    # In-order values of every bucket, buckets in ascending index order. O(n + m)
    def __str__(self):
        return "".join(str(tree) for tree in self.storage if tree is not None).strip()

    # One line per bucket. A bucket without a tree shows "null" and a tree emptied by removals
    # shows "(empty tree)". With verbose, the size, height and leaf count of every tree follow its
    # line. O(n + m)
    def to_string_debug(self, verbose=False):
        lines = []
        for i, tree in enumerate(self.storage):
            if tree is None:
                lines.append("[" + str(i) + "]: null")
                continue
            if len(tree) == 0:
                lines.append("[" + str(i) + "]: (empty tree)")
            else:
                lines.append("[" + str(i) + "]: " + str(tree).strip())
            if verbose:
                lines.append("\t tree size:" + str(tree.size()))
                lines.append("\t tree height:" + str(tree.height()))
                lines.append("\t number of leaves:" + str(tree.num_leaves()))
        return "\n".join(lines).strip()

    # Average height of the trees. With non_empty_only, buckets without values are skipped and
    # -1.0 is returned when there are none; otherwise a missing tree counts as height -1. O(n + m)
    def avg_tree_height(self, non_empty_only=False):
        return self._average(BinarySearchTree.height, -1, non_empty_only, -1.0)

    # Average number of values per tree; 0.0 when non_empty_only finds no values. O(m)
    def avg_tree_size(self, non_empty_only=False):
        return self._average(BinarySearchTree.size, 0, non_empty_only, 0.0)

    # Average leaf count per tree; 0.0 when non_empty_only finds no values. O(n + m)
    def avg_num_leaves(self, non_empty_only=False):
        return self._average(BinarySearchTree.num_leaves, 0, non_empty_only, 0.0)

    def _average(self, metric, missing, non_empty_only, no_trees):
        total = 0
        trees = 0
        for tree in self.storage:
            if non_empty_only:
                if tree is not None and len(tree) > 0:
                    total += metric(tree)
                    trees += 1
            else:
                total += missing if tree is None else metric(tree)
                trees += 1
        if trees == 0:
            return no_trees
        return total / trees

    # Smallest and largest tree size over all buckets as a Pair. O(m)
    def min_and_max_tree_size(self):
        return self._min_and_max(BinarySearchTree.size, 0)

    # Smallest and largest tree height over all buckets as a Pair, -1 for a missing tree. O(n + m)
    def min_and_max_tree_height(self):
        return self._min_and_max(BinarySearchTree.height, -1)

    # Smallest and largest leaf count over all buckets as a Pair. O(n + m)
    def min_and_max_num_leaves(self):
        return self._min_and_max(BinarySearchTree.num_leaves, 0)

    def _min_and_max(self, metric, missing):
        values = [missing if tree is None else metric(tree) for tree in self.storage]
        return Pair(min(values), max(values))


class HashTableIterator(object):
    # O(1) to initialize dedicated iterator class
    def __init__(self, hash_table):
        self.outer = 0
        self.inner = 0
        self.bucket = []
        self.ht = hash_table

    # Conforms to iterator protocol. Runs in O(1)
    def __iter__(self):
        return self

    # The outer loop steps through the buckets of the hash table while the inner loop steps through
    # the pre-order values of the tree at that index. Each tree is flattened when the outer loop
    # reaches it, which is O(k) for a tree of k values.
    def __next__(self):
        while True:
            if self.inner < len(self.bucket):
                value = self.bucket[self.inner]
                self.inner += 1
                return value
            if self.outer >= len(self.ht.storage):
                raise StopIteration
            tree = self.ht.storage[self.outer]
            self.bucket = [] if tree is None else tree.to_array()
            self.outer += 1
            self.inner = 0


class Set(object):
    # A set of comparable values stored in a HashTable. Operations building a new set never modify
    # their operands. O(1) to initialize.
    def __init__(self):
        self.storage = HashTable(5)

    def __len__(self):
        return self.storage.size()

    def __contains__(self, value):
        return self.storage.contains(value)

    def __iter__(self):
        return iter(self.storage)

    def __str__(self):
        return str(self.storage)

    # Number of values in the set. O(1)
    def size(self):
        return self.storage.size()

    # Adds value if it is not already present. Returns True if it was added.
    def add(self, value):
        return self.storage.add(value)

    def contains(self, value):
        return self.storage.contains(value)

    # Removes value if present. Returns True if it was removed.
    def remove(self, value):
        return self.storage.remove(value)

    def to_array(self):
        return self.storage.to_array()

    # Adds every value of an iterable and returns how many of them were new. O(n)
    def add_all(self, values):
        added = 0
        for value in values:
            if self.add(value):
                added += 1
        return added

    # Values present in both sets. O(n)
    def intersection(self, other):
        result = Set()
        for value in other:
            if self.contains(value):
                result.add(value)
        return result

    # Values present in either set. O(n)
    def union(self, other):
        result = Set()
        result.add_all(self)
        result.add_all(other)
        return result

    # Values of this set that are not in other. O(n)
    def difference(self, other):
        result = Set()
        for value in self:
            if not other.contains(value):
                result.add(value)
        return result

    # Values present in exactly one of the two sets. O(n)
    def symmetric_difference(self, other):
        result = self.difference(other)
        for value in other:
            if not self.contains(value):
                result.add(value)
        return result

    # Returns True if every value of this set is also in other. O(n)
    def is_subset(self, other):
        for value in self:
            if not other.contains(value):
                return False
        return True

    # Returns True if the two sets share no value. O(n)
    def is_disjoint(self, other):
        for value in self:
            if other.contains(value):
                return False
        for value in other:
            if self.contains(value):
                return False
        return True


@total_ordering
class Pair(object):
    # Two values held together, e.g. the min and max reported by HashTable statistics. Pairs
    # compare by first value, then second, so they can be stored in a HashTable themselves.
    def __init__(self, first, second):
        self.first = first
        self.second = second

    # Written as <first,second> with no spaces.
    def __str__(self):
        return "<" + str(self.first) + "," + str(self.second) + ">"

    def __repr__(self):
        return "Pair(" + repr(self.first) + ", " + repr(self.second) + ")"

    def __eq__(self, other):
        if not isinstance(other, Pair):
            return NotImplemented
        return self.first == other.first and self.second == other.second

    def __lt__(self, other):
        if not isinstance(other, Pair):
            return NotImplemented
        return (self.first, self.second) < (other.first, other.second)

    # Hash code combining both values with a prime multiplier: 31 * (31 + h(first)) + h(second),
    # wrapped to 32 bits. Equal pairs always have equal hash codes. O(1) for numbers.
    def hash_code(self):
        return combine_hashes([default_hash(self.first), default_hash(self.second)])

    def __hash__(self):
        return self.hash_code()
