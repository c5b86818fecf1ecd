from containers import HashTable, Pair, Set


class TestPair:
    def test_string(self):
        assert str(Pair("George", "Mason")) == "<George,Mason>"
        assert str(Pair(0, 3)) == "<0,3>"

    def test_equality(self):
        name1 = Pair("George", "Mason")
        name2 = Pair("George", "Washington")
        name3 = Pair("George", "Mason")
        assert name1 != name2
        assert name1 == name3
        assert name1 != ("George", "Mason")

    def test_hash_code_follows_equality(self):
        name1 = Pair("George", "Mason")
        name2 = Pair("George", "Washington")
        name3 = Pair("George", "Mason")
        assert name1.hash_code() == name3.hash_code()
        assert name1.hash_code() != name2.hash_code()
        assert hash(name1) == hash(name3)

    def test_hash_code_value(self):
        assert Pair(1, 2).hash_code() == 31 * (31 + 1) + 2

    def test_small_pairs_have_no_repeated_hash_codes(self):
        hash_codes = Set()
        repeat = 0
        for i in range(-10, 10):
            for j in range(-10, 10):
                if not hash_codes.add(Pair(i, j).hash_code()):
                    repeat += 1
        assert repeat == 0
        assert hash_codes.size() == 400

    def test_ordering(self):
        assert Pair(1, 2) < Pair(1, 3)
        assert Pair(2, 0) > Pair(1, 9)
        assert Pair(1, 2) <= Pair(1, 2)

    def test_pairs_in_a_table(self):
        table = HashTable(4)
        assert table.add(Pair("a", 1))
        assert not table.add(Pair("a", 1))
        assert table.add(Pair("a", 2))
        assert table.contains(Pair("a", 2))
        assert table.size() == 2

    def test_none_member_has_a_fixed_hash_code(self):
        assert Pair(None, 1).hash_code() == 31 * (31 + 0) + 1
