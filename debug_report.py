from random import Random

from containers import HashTable

SEPARATOR = "=" * 53
RULE = "-" * 53


# Table of three strings; "c" and "computer" share bucket 9 of 10. O(1)
def string_table():
    table = HashTable(10)
    for value in ["a", "c", "computer"]:
        table.add(value)
    return table


# Table of capacity 5 that doubles to 10 when 55 is added. O(n)
def growth_table():
    table = HashTable(5)
    for value in [105, 26, 11, 55, 5, -11, 31]:
        table.add(value)
    return table


# Fifteen values of capacity 20 that collide into three trees. O(n)
def clustered_table():
    table = HashTable(20)
    for value in [160, 20, 100, 80, 400, 280, 640, 543, 3, 283, 343, 443, 334, 974, 454]:
        table.add(value)
    return table


# Fifteen distinct values drawn from a seeded generator so every report is the same. O(n)
def uniform_table(seed=0):
    table = HashTable(20)
    generator = Random(seed)
    while table.size() < 15:
        table.add(generator.randrange(1000))
    return table


# Title block followed by the verbose debug view of a table.
def section(title, table):
    return SEPARATOR + "\n" + title + "\n" + RULE + "\n" + table.to_string_debug(True) + "\n"


# Assembles the report for all sample tables. The growth table appears a second time after being
# rehashed to capacity 11. O(n + m)
def build_report():
    sections = [section('string table after add("a"), add("c"), add("computer")', string_table())]
    table = growth_table()
    sections.append(section("growth table after adding these in order: 105, 26, 11, 55, 5, -11, 31", table))
    table.rehash(11)
    sections.append(section("growth table after rehash to capacity 11", table))
    sections.append(section("table of 15 values clustered into three trees", clustered_table()))
    sections.append(section("table of 15 values uniformly distributed", uniform_table()))
    return "\n".join(sections)


# Writes the report to a text file, replacing any previous one.
def write_report(file_path="debug.txt"):
    with open(file_path, "w") as file:
        file.write(build_report())


def print_report():
    print(build_report())


if __name__ == "__main__":
    write_report()
