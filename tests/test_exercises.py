import pytest

from labbench.exercises import (
    Student,
    is_palindrome,
    power_of_two,
    remove_duplicates,
    repeat_digits,
    run_roster,
    staircase,
    swap_first_two,
)


@pytest.mark.parametrize("exponent", range(0, 20))
def test_powers_of_two(exponent):
    assert power_of_two(2 ** exponent) is True
    if exponent > 1:
        assert power_of_two(2 ** exponent + 1) is False


@pytest.mark.parametrize("number", [0, -4, 6, 12, 1023])
def test_not_powers_of_two(number):
    assert power_of_two(number) is False


def test_power_of_two_source_value():
    assert power_of_two(1024) is True


def test_swap_first_two():
    items = ["first value", "second value", "third"]
    swapped = swap_first_two(items)
    assert swapped[0] == items[1]
    assert swapped[1] == items[0]
    assert swapped[2:] == items[2:]
    assert swap_first_two(swapped) == items
    with pytest.raises(IndexError):
        swap_first_two(["only"])


def test_palindromes():
    assert is_palindrome("race a car") is False
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("") is True


def test_palindrome_of_mirrored_text():
    text = "Ab1, c"
    assert is_palindrome(text + text[::-1]) is True


def test_remove_duplicates_invariants():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    result = remove_duplicates(nums)
    assert set(result) == set(nums)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert result == sorted(result)
    assert remove_duplicates([]) == []


def test_staircase_indentation():
    lines = staircase(5)
    assert len(lines) == 5
    for step, line in enumerate(lines):
        assert line.strip() == str(step)
        assert len(line) - len(line.lstrip(" ")) == step
    assert staircase(0) == []


def test_repeat_digits():
    numbers = [3, 1, 5]
    result = repeat_digits(numbers)
    assert len(result) == len(numbers)
    for number, text in zip(numbers, result):
        assert set(text) == {str(number)}
        assert len(text) == number
    assert repeat_digits([0, -2]) == ["", ""]


def test_student_text():
    assert str(Student("Ann", 3.5)) == "Ann has a GPA of 3.5"
    assert str(Student("Bob", 3.456)) == "Bob has a GPA of 3.5"
    assert str(Student()).startswith("not intialized has a GPA of")


def test_roster_session():
    out = run_roster(["add Ann 3.5", "add Cy 3.5", "print", "drop 0", "print", "quit"])
    assert out.count("0: Ann has a GPA of 3.5") == 1
    assert out.count("1: Cy has a GPA of 3.5") == 1
    assert out.count("0: Cy has a GPA of 3.5") == 1
    assert "Ann's GPA: " in out
    assert "Index of student to drop: " in out


def test_roster_stops_at_quit():
    out = run_roster(["quit", "add Ann 3.5", "print"])
    assert out == "Enter Option: \n"


def test_roster_bad_drop_index():
    with pytest.raises(IndexError):
        run_roster(["add Ann 3.5", "drop 4"])


def test_roster_bad_gpa():
    with pytest.raises(ValueError):
        run_roster(["add Ann high"])