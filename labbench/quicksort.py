"""Quicksort with median-of-three pivots, and a runner for command files."""

from __future__ import annotations

import sys
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 1


class QuickSort(Generic[T]):
    """A growable array sorted in place by median-of-three quicksort.

    ``comparisons`` and ``swaps`` count the work done by the sorting
    operations; ``sort_all`` resets them.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._items: list[T] = []
        self._capacity = 0
        self.comparisons = 0
        self.swaps = 0
        self.create_array(capacity)

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before it grows."""
        return self._capacity

    def create_array(self, capacity: int) -> None:
        """Discard all elements and start over with the given capacity."""
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._items = []
        self._capacity = capacity

    def add_element(self, element: T) -> None:
        """Append an element, doubling the capacity when it runs short."""
        if len(self._items) + 1 >= self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        self._items.append(element)

    def clear(self) -> None:
        """Remove all elements, keeping the current capacity."""
        self._items = []

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Empty"
        return ",".join(str(item) for item in self._items)

    def _swap(self, first: int, second: int) -> None:
        items = self._items
        items[first], items[second] = items[second], items[first]
        self.swaps += 1

    def median_of_three(self, left: int, right: int) -> int:
        """Order the left, middle and last values of ``[left, right)``.

        Returns the middle index ``(left + right) // 2``; afterwards
        ``a[left] <= a[middle] <= a[right - 1]``.  Raises IndexError if the
        array is empty or the bounds do not satisfy ``0 <= left < right <= len``.
        """
        count = len(self._items)
        if count == 0:
            raise IndexError("array is empty")
        if not 0 <= left < right <= count:
            raise IndexError(f"invalid range [{left}, {right}) for {count} elements")
        items = self._items
        last = right - 1
        middle = (left + right) // 2
        while items[left] > items[middle] or items[middle] > items[last]:
            self.comparisons += 1
            if items[left] > items[middle]:
                self._swap(left, middle)
            self.comparisons += 1
            if items[middle] > items[last]:
                self._swap(middle, last)
        return middle

    def partition(self, left: int, right: int, pivot_index: int) -> int:
        """Partition ``[left, right)`` around the value at ``pivot_index``.

        Smaller values end up left of the pivot and larger ones right of it.
        Returns the pivot's final index.  Raises IndexError if the array is
        empty or any index is out of bounds or ``left`` is not below ``right``.
        """
        count = len(self._items)
        if count == 0:
            raise IndexError("array is empty")
        if not (0 <= left < right <= count):
            raise IndexError(f"invalid range [{left}, {right}) for {count} elements")
        if not (left <= pivot_index <= right and pivot_index < count):
            raise IndexError(f"pivot index {pivot_index} outside [{left}, {right}]")

        items = self._items
        self._swap(left, pivot_index)
        pivot = items[left]
        up = left + 1
        down = right - 1
        while True:
            while up < count and items[up] < pivot:
                self.comparisons += 1
                up += 1
            while items[down] > pivot:
                self.comparisons += 1
                down -= 1
            self.comparisons += 1
            if down <= up:
                self._swap(left, down)
                return down
            self._swap(up, down)
            down -= 1
            up += 1

    def sort(self, left: int, right: int) -> None:
        """Sort the elements in ``[left, right)``.

        Raises IndexError unless ``0 <= left <= right <= len``.
        """
        count = len(self._items)
        if not 0 <= left <= right <= count:
            raise IndexError(f"invalid range [{left}, {right}) for {count} elements")
        pending = [(left, right)]
        while pending:
            low, high = pending.pop()
            if high - low < 2:
                continue
            pivot = self.partition(low, high, self.median_of_three(low, high))
            pending.append((pivot, high))
            pending.append((low, pivot))

    def sort_all(self) -> None:
        """Reset the counters and sort every element."""
        self.comparisons = 0
        self.swaps = 0
        self.sort(0, len(self._items))


def _int_args(fields: list[str], count: int, line: str) -> list[int]:
    values = fields[1 : 1 + count]
    if len(values) < count:
        raise ValueError(f"expected {count} numbers in {line!r}")
    try:
        return [int(value) for value in values]
    except ValueError:
        raise ValueError(f"invalid number in {line!r}") from None


def run_commands(lines: Iterable[str]) -> list[str]:
    """Run quicksort commands and return the output lines they produce."""
    sorter: QuickSort[int] = QuickSort()
    output: list[str] = []
    for raw in lines:
        line = raw.rstrip("\n")
        fields = line.split()
        if not fields:
            continue
        command = fields[0]
        if command == "QuickSort":
            (capacity,) = _int_args(fields, 1, line)
            sorter.create_array(capacity)
            output.append(f"{line} OK")
        elif command == "Capacity":
            output.append(f"{line} {sorter.capacity}")
        elif command == "Clear":
            sorter.clear()
            output.append(f"{line} OK")
        elif command == "AddToArray":
            values = _int_args(fields, len(fields) - 1, line)
            for value in values:
                sorter.add_element(value)
            output.append(f"{command}  {','.join(map(str, values))} OK")
        elif command == "Size":
            output.append(f"{line} {len(sorter)}")
        elif command == "PrintArray":
            output.append(f"{line} {sorter}")
        elif command == "MedianOfThree":
            left, right = _int_args(fields, 2, line)
            try:
                result = sorter.median_of_three(left, right)
            except IndexError:
                result = -1
            output.append(f"{command} {left},{right} = {result}")
        elif command == "Partition":
            left, right, pivot = _int_args(fields, 3, line)
            try:
                result = sorter.partition(left, right, pivot)
            except IndexError:
                result = -1
            output.append(f"{command} {left},{right},{pivot} = {result}")
        elif command == "SortAll":
            sorter.sort_all()
            output.append(f"{command} OK")
        elif command == "Sort":
            left, right = _int_args(fields, 2, line)
            sorter.comparisons = 0
            sorter.swaps = 0
            try:
                sorter.sort(left, right)
                status = "OK"
            except IndexError:
                status = "Error"
            output.append(f"{command} {left},{right} {status}")
    return output


def main(argv: list[str] | None = None) -> int:
    """Run the commands in an input file and write the results to an output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: quicksort INPUT OUTPUT", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as source:
            results = run_commands(source.read().splitlines())
        with open(args[1], "w", encoding="utf-8") as target:
            target.writelines(f"{line}\n" for line in results)
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())