import pytest
import dicekeep as dk

SOURCE = [5, 1, 3, 3, 9, 3, 7]
# Ascending: 1, 3, 3, 3, 5, 7, 9
SORTED = [1, 2, 3, 5, 0, 6, 4]

def test_found():
    position = dk.indirect_binary_search(SOURCE, SORTED, 7)
    assert position == 5

def test_insertion_marker():
    assert dk.indirect_binary_search(SOURCE, SORTED, 4) == -1 - 4
    assert dk.indirect_binary_search(SOURCE, SORTED, 0) == -1
    assert dk.indirect_binary_search(SOURCE, SORTED, 10) == -1 - 7

def test_empty_index_set():
    assert dk.indirect_binary_search(SOURCE, [], 3) == -1

def test_found_equal_is_inside_run():
    position = dk.indirect_binary_search(SOURCE, SORTED, 3)
    assert SOURCE[SORTED[position]] == 3

def test_window():
    # Only 5, 7, 9 are searched.
    assert dk.indirect_binary_search(SOURCE, SORTED, 3, start=4) == -1 - 4
    assert dk.indirect_binary_search(SOURCE, SORTED, 9, start=0, end=3) == -1 - 3

def test_bad_window():
    with pytest.raises(IndexError, match=r".*start.*"):
        dk.indirect_binary_search(SOURCE, SORTED, 3, start=-1)
    with pytest.raises(IndexError, match=r".*end.*"):
        dk.indirect_binary_search(SOURCE, SORTED, 3, end=8)

def test_incomparable_is_unavailable():
    source = [1, 2, "A"]
    assert dk.indirect_binary_search(source, [0, 1], "A") is None

def test_source_untouched():
    source = list(SOURCE)
    indexes = list(SORTED)
    dk.indirect_binary_search_with_duplicates(source, indexes, 3)
    assert source == SOURCE
    assert indexes == SORTED

def test_cmp_style_comparison():
    def cmp(a, b):
        return (a > b) - (a < b)

    assert dk.indirect_binary_search(SOURCE, SORTED, 5, compare=cmp) == 4

class TestDuplicates:
    def test_last_of_run(self):
        assert dk.indirect_binary_search_with_duplicates(SOURCE, SORTED, 3) == 3

    def test_first_of_run(self):
        position = dk.indirect_binary_search_with_duplicates(
            SOURCE, SORTED, 3, return_first_position=True)
        assert position == 1

    def test_single_entry_run(self):
        assert dk.indirect_binary_search_with_duplicates(SOURCE, SORTED, 9) == 6
        assert dk.indirect_binary_search_with_duplicates(
            SOURCE, SORTED, 1, return_first_position=True) == 0

    def test_miss_is_unchanged(self):
        assert dk.indirect_binary_search_with_duplicates(SOURCE, SORTED, 4) == -1 - 4
        assert dk.indirect_binary_search_with_duplicates(
            SOURCE, SORTED, 4, return_first_position=True) == -1 - 4

    def test_run_walk_stays_in_window(self):
        position = dk.indirect_binary_search_with_duplicates(
            SOURCE, SORTED, 3, start=2, end=3)
        assert position == 2
        position = dk.indirect_binary_search_with_duplicates(
            SOURCE, SORTED, 3, start=2, end=4, return_first_position=True)
        assert position == 2

    def test_unavailable(self):
        assert dk.indirect_binary_search_with_duplicates([1, "A"], [0], "A") is None

    def test_descending_orientation(self):
        compare = dk.reversed_comparison(dk.default_comparison)
        # Descending: 9, 7, 5, 3, 3, 3, 1
        descending = [4, 6, 0, 2, 3, 5, 1]
        assert dk.indirect_binary_search_with_duplicates(
            SOURCE, descending, 3, compare=compare) == 5
        assert dk.indirect_binary_search_with_duplicates(
            SOURCE, descending, 3, compare=compare, return_first_position=True) == 3
        assert dk.indirect_binary_search_with_duplicates(
            SOURCE, descending, 8, compare=compare) == -1 - 1

def test_insertion_point():
    assert dk.insertion_point(3) == 4
    assert dk.insertion_point(-1) == 0
    assert dk.insertion_point(-5) == 4
    with pytest.raises(ValueError):
        dk.insertion_point(None)
