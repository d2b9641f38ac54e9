"""Small exercises: powers of two, palindromes, de-duplication and a student roster."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, Iterator, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class Student:
    """A student's name and grade point average."""

    name: str = "not intialized"
    gpa: float = 0.0

    def __str__(self) -> str:
        return f"{self.name} has a GPA of {self.gpa:.2g}"


def power_of_two(number: int) -> bool:
    """True if the number is a positive power of two."""
    return number > 0 and number & (number - 1) == 0


def swap_first_two(items: Sequence[T]) -> list[T]:
    """A copy of the items with the first two exchanged."""
    if len(items) < 2:
        raise IndexError("need at least two items to swap")
    first, second, *rest = items
    return [second, first, *rest]


def is_palindrome(text: str) -> bool:
    """True if the letters and digits read the same both ways, ignoring case."""
    chars = [char.lower() for char in text if char.isascii() and char.isalnum()]
    return chars == chars[::-1]


def remove_duplicates(nums: Iterable[T]) -> list[T]:
    """The values with runs of equal neighbours collapsed to one."""
    return [value for value, _ in groupby(nums)]


def staircase(count: int) -> list[str]:
    """Lines 0..count-1, each indented by its own number of spaces."""
    return [" " * step + str(step) for step in range(count)]


def repeat_digits(numbers: Iterable[int]) -> list[str]:
    """Each number written out as many times as its value."""
    return [str(number) * max(number, 0) for number in numbers]


def _next_token(tokens: Iterator[str], what: str) -> str:
    token = next(tokens, None)
    if token is None:
        raise ValueError(f"missing {what}")
    return token


def run_roster(lines: Iterable[str]) -> str:
    """Run add/print/drop/quit roster commands and return the session text."""
    tokens = iter([token for line in lines for token in line.split()])
    students: list[Student] = []
    out: list[str] = []
    while True:
        out.append("Enter Option: \n")
        option = next(tokens, None)
        if option is None or option == "quit":
            break
        if option == "add":
            out.append("Student name: ")
            name = _next_token(tokens, "student name")
            out.append(f"{name}'s GPA: ")
            raw = _next_token(tokens, "GPA")
            try:
                gpa = float(raw)
            except ValueError:
                raise ValueError(f"invalid GPA {raw!r}") from None
            students.append(Student(name, gpa))
        elif option == "print":
            out.extend(f"{index}: {student}\n" for index, student in enumerate(students))
        elif option == "drop":
            out.append("Index of student to drop: ")
            raw = _next_token(tokens, "index")
            try:
                index = int(raw)
            except ValueError:
                raise ValueError(f"invalid index {raw!r}") from None
            if not 0 <= index < len(students):
                raise IndexError(f"no student at index {index}")
            del students[index]
    return "".join(out)