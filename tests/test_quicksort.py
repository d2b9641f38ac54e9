import random

import pytest

from labbench.quicksort import QuickSort, main, run_commands


def _filled(values, capacity=1):
    sorter = QuickSort(capacity)
    for value in values:
        sorter.add_element(value)
    return sorter


def _items(sorter):
    text = str(sorter)
    return [] if text == "Empty" else [int(part) for part in text.split(",")]


def test_new_array_is_empty_with_default_capacity():
    sorter = QuickSort()
    assert str(sorter) == "Empty"
    assert len(sorter) == 0
    assert sorter.capacity == 1


def test_add_element_grows_capacity_and_keeps_order():
    values = [9, 4, 7, 1, 8, 2, 6]
    sorter = _filled(values)
    assert len(sorter) == len(values)
    assert sorter.capacity >= len(values)
    assert str(sorter) == ",".join(str(v) for v in values)


def test_clear_keeps_capacity():
    sorter = _filled([3, 2, 1, 5, 4])
    capacity = sorter.capacity
    sorter.clear()
    assert len(sorter) == 0
    assert sorter.capacity == capacity
    assert str(sorter) == "Empty"


def test_create_array_resets_contents_and_capacity():
    sorter = _filled([1, 2, 3])
    sorter.create_array(10)
    assert sorter.capacity == 10
    assert len(sorter) == 0


def test_create_array_rejects_negative_capacity():
    with pytest.raises(ValueError):
        QuickSort().create_array(-1)


def test_median_of_three_orders_ends_and_middle():
    values = [5, 1, 3, 8, 0, 2]
    sorter = _filled(values)
    middle = sorter.median_of_three(0, len(values))
    assert middle == len(values) // 2
    items = _items(sorter)
    assert items[0] <= items[middle] <= items[-1]
    assert sorted(items) == sorted(values)


def test_median_of_three_on_subrange_leaves_rest_alone():
    values = [9, 7, 5, 3, 1]
    sorter = _filled(values)
    middle = sorter.median_of_three(1, 4)
    assert middle == 2
    items = _items(sorter)
    assert items[0] == 9 and items[4] == 1
    assert items[1] <= items[2] <= items[3]


@pytest.mark.parametrize("left, right", [(0, 0), (2, 1), (-1, 3), (0, 6), (5, 6)])
def test_median_of_three_rejects_bad_bounds(left, right):
    sorter = _filled([4, 2, 5, 1, 3])
    with pytest.raises(IndexError):
        sorter.median_of_three(left, right)


def test_median_of_three_rejects_empty_array():
    with pytest.raises(IndexError):
        QuickSort().median_of_three(0, 1)


def test_partition_splits_around_pivot():
    values = [6, 2, 9, 4, 7, 1, 8, 3, 5]
    sorter = _filled(values)
    pivot_value = values[4]
    index = sorter.partition(0, len(values), 4)
    items = _items(sorter)
    assert items[index] == pivot_value
    assert all(v <= pivot_value for v in items[:index])
    assert all(v >= pivot_value for v in items[index + 1 :])
    assert sorted(items) == sorted(values)


@pytest.mark.parametrize(
    "left, right, pivot",
    [(0, 0, 0), (3, 2, 2), (0, 4, 4), (-1, 3, 1), (0, 5, 5), (2, 4, 1)],
)
def test_partition_rejects_bad_indexes(left, right, pivot):
    sorter = _filled([4, 2, 5, 1])
    with pytest.raises(IndexError):
        sorter.partition(left, right, pivot)


def test_partition_rejects_empty_array():
    with pytest.raises(IndexError):
        QuickSort().partition(0, 1, 0)


def test_sort_all_sorts_random_data():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(200)]
    sorter = _filled(values)
    sorter.sort_all()
    assert _items(sorter) == sorted(values)


@pytest.mark.parametrize(
    "values",
    [[], [7], [2, 1], [1, 1, 1, 1], list(range(30)), list(range(30, 0, -1))],
)
def test_sort_all_edge_cases(values):
    sorter = _filled(values)
    sorter.sort_all()
    assert _items(sorter) == sorted(values)


def test_sort_all_counts_swaps_on_unsorted_data():
    sorter = _filled([5, 4, 3, 2, 1])
    sorter.sort_all()
    assert sorter.swaps > 0
    assert sorter.comparisons > 0


def test_sort_subrange_only():
    values = [9, 8, 7, 6, 5, 4, 3]
    sorter = _filled(values)
    sorter.sort(2, 6)
    items = _items(sorter)
    assert items[:2] == values[:2]
    assert items[6:] == values[6:]
    assert items[2:6] == sorted(values[2:6])


@pytest.mark.parametrize("left, right", [(-1, 2), (3, 2), (0, 8)])
def test_sort_rejects_bad_range(left, right):
    sorter = _filled([3, 1, 2, 5, 4])
    with pytest.raises(IndexError):
        sorter.sort(left, right)


def test_sort_works_with_strings():
    sorter = _filled(["pear", "apple", "fig", "banana"])
    sorter.sort_all()
    assert str(sorter) == "apple,banana,fig,pear"


def test_run_commands_basic_session():
    output = run_commands(
        [
            "QuickSort 5",
            "Capacity",
            "AddToArray 3 1 2",
            "Size",
            "PrintArray",
            "SortAll",
            "PrintArray",
            "Clear",
            "PrintArray",
            "Capacity",
        ]
    )
    assert output == [
        "QuickSort 5 OK",
        "Capacity 5",
        "AddToArray  3,1,2 OK",
        "Size 3",
        "PrintArray 3,1,2",
        "SortAll OK",
        "PrintArray 1,2,3",
        "Clear OK",
        "PrintArray Empty",
        "Capacity 5",
    ]


def test_run_commands_reports_invalid_indexes_as_minus_one():
    output = run_commands(
        ["AddToArray 4 2 3", "MedianOfThree 0 0", "Partition 2 1 1"]
    )
    assert output[1] == "MedianOfThree 0,0 = -1"
    assert output[2] == "Partition 2,1,1 = -1"


def test_run_commands_median_and_sort():
    output = run_commands(
        ["AddToArray 5 1 3 2 4", "MedianOfThree 0 5", "Sort 0 5", "PrintArray"]
    )
    assert output[1] == "MedianOfThree 0,5 = 2"
    assert output[2] == "Sort 0,5 OK"
    assert output[3] == "PrintArray 1,2,3,4,5"


def test_run_commands_ignores_blank_and_unknown_lines():
    assert run_commands(["", "Nonsense here", "Size"]) == ["Size 0"]


def test_run_commands_rejects_missing_arguments():
    with pytest.raises(ValueError):
        run_commands(["MedianOfThree 1"])


def test_main_writes_output_file(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("AddToArray 9 8 7\nSortAll\nPrintArray\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8").splitlines() == [
        "AddToArray  9,8,7 OK",
        "SortAll OK",
        "PrintArray 7,8,9",
    ]


def test_main_without_arguments_fails():
    assert main([]) == 1