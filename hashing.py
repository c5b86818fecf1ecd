# Hash functions used to place values into the buckets of a HashTable. Python's own hash() is
# salted per process for strings, so the table depends on these instead. Placement of None,
# numbers, strings, tuples and pairs of them is reproducible from one run to the next; other
# objects fall back to hash(), which may differ between runs.

INT32_MIN = -2 ** 31
INT32_RANGE = 2 ** 32


# Wraps an arbitrary integer into the signed 32-bit range. O(1)
def to_int32(n):
    n = (n - INT32_MIN) % INT32_RANGE
    return n + INT32_MIN


# Polynomial string hash over the UTF-16 code units of the string, h = 31 * h + unit, kept to
# signed 32 bits. "a" hashes to 97 and "computer" to -599163109. Runs in O(n) for n characters.
def string_hash(string):
    data = string.encode("utf-16-be")
    h = 0
    for i in range(0, len(data), 2):
        unit = (data[i] << 8) | data[i + 1]
        h = to_int32(31 * h + unit)
    return h


# Combines a sequence of hash codes starting from 1 with a prime multiplier. O(n)
def combine_hashes(hashes):
    result = 1
    for h in hashes:
        result = to_int32(31 * result + h)
    return result


# The hasher used by HashTable unless another one is injected. Values that know how to hash
# themselves (e.g. Pair) provide a hash_code() method. Values that compare equal hash equally:
# bools hash as the ints they equal and whole floats as their int value. O(1) for numbers, O(n)
# for strings and tuples.
def default_hash(value):
    if value is None:
        return 0
    hash_code = getattr(value, "hash_code", None)
    if callable(hash_code):
        return hash_code()
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        return string_hash(value)
    if isinstance(value, tuple):
        return combine_hashes(default_hash(item) for item in value)
    return hash(value)


# Maps a hash code onto a bucket of a table with the given capacity. Python integers do not
# overflow, so abs() of the most negative 32-bit hash stays positive and the index is always in
# range. O(1)
def bucket_index(hash_value, capacity):
    return abs(hash_value) % capacity
