import pytest

from drillbox.hackerrank import (
    breaking_records,
    grading_students,
    kangaroo,
    maximum_perimeter_triangle,
    migratory_birds,
    picking_numbers,
    rotate_left,
    separate_numbers,
    strings_xor,
)


def test_breaking_records_increasing():
    scores = [1, 2, 3, 4, 5]
    assert breaking_records(scores) == [len(scores) - 1, 0]


def test_breaking_records_decreasing():
    scores = [9, 7, 5, 2]
    assert breaking_records(scores) == [0, len(scores) - 1]


def test_breaking_records_single():
    assert breaking_records([42]) == [0, 0]


def test_breaking_records_empty():
    with pytest.raises(ValueError):
        breaking_records([])


def test_triangle_too_few_sticks():
    assert maximum_perimeter_triangle([1, 2]) == [-1]


def test_triangle_degenerate():
    assert maximum_perimeter_triangle([1, 2, 3]) == [-1]


def test_triangle_from_input():
    assert maximum_perimeter_triangle([1, 1, 1, 3]) == [1, 1, 1]


def test_triangle_invariants():
    sticks = [2, 3, 2, 8, 4, 1, 5]
    result = maximum_perimeter_triangle(sticks)
    assert result == sorted(result)
    assert result[2] < result[0] + result[1]
    assert all(side in sticks for side in result)


def test_migratory_birds_most_frequent():
    assert migratory_birds([1, 4, 4, 4, 5, 3]) == 4


def test_migratory_birds_tie_prefers_lowest():
    assert migratory_birds([2, 2, 1, 1]) == 1


def test_migratory_birds_empty():
    with pytest.raises(ValueError):
        migratory_birds([])


def test_strings_xor_self_is_zero():
    assert strings_xor("10110", "10110") == "0" * 5


def test_strings_xor_roundtrip():
    a, b = "1101001", "0111010"
    assert strings_xor(strings_xor(a, b), b) == a


def test_strings_xor_short_second():
    with pytest.raises(ValueError):
        strings_xor("101", "1")


def test_grading_failing_unchanged():
    assert grading_students([0, 33, 37]) == [0, 33, 37]


def test_grading_invariants():
    grades = list(range(38, 101))
    rounded = grading_students(grades)
    for before, after in zip(grades, rounded):
        assert 0 <= after - before < 3
        if after != before:
            assert after % 5 == 0


def test_rotate_full_cycle():
    arr = [1, 2, 3, 4, 5]
    assert rotate_left(len(arr), arr) == arr
    assert rotate_left(0, arr) == arr


def test_rotate_roundtrip():
    arr = [1, 2, 3, 4, 5]
    assert rotate_left(len(arr) - 2, rotate_left(2, arr)) == arr


def test_rotate_moves_head_to_tail():
    arr = [7, 8, 9]
    assert rotate_left(1, arr) == [8, 9, 7]


def test_rotate_out_of_range():
    with pytest.raises(ValueError):
        rotate_left(4, [1, 2, 3])


def test_kangaroo_meets():
    assert kangaroo(0, 3, 4, 2) == "YES"


def test_kangaroo_never_meets():
    assert kangaroo(0, 2, 5, 3) == "NO"


def test_kangaroo_same_speed():
    assert kangaroo(3, 2, 3, 2) == "YES"
    assert kangaroo(3, 2, 4, 2) == "NO"


def test_kangaroo_same_start_different_speed():
    assert kangaroo(5, 1, 5, 2) == "NO"


def test_picking_numbers_empty():
    assert picking_numbers([]) == 0


def test_picking_numbers_all_equal():
    values = [6] * 7
    assert picking_numbers(values) == len(values)


def test_picking_numbers_example():
    assert picking_numbers([4, 6, 5, 3, 3, 1]) == 3


def test_separate_numbers_too_short():
    assert separate_numbers("1") == "NO\n"


def test_separate_numbers_sequence():
    assert separate_numbers("1234") == "YES 1\nNo\n"


def test_separate_numbers_broken_sequence():
    assert separate_numbers("101103") == "NO\n"


def test_separate_numbers_no_start():
    assert separate_numbers("13") == "No\n"


def test_separate_numbers_carry():
    assert separate_numbers("99100").startswith("YES 99\n")