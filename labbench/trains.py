"""Railway turntable, siding queue and stack, and a runner for command files."""

from __future__ import annotations

import collections
import sys
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue with indexed access from the front."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: collections.deque[T] = collections.deque(items)

    def push_front(self, value: T) -> None:
        """Insert a value at the front."""
        self._items.appendleft(value)

    def push_back(self, value: T) -> None:
        """Insert a value at the rear."""
        self._items.append(value)

    def pop_front(self) -> T:
        """Remove and return the front value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_back(self) -> T:
        """Remove and return the rear value."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def front(self) -> T:
        """Return the front value without removing it."""
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> T:
        """Return the rear value without removing it."""
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)


class StationError(Exception):
    """A station move that cannot be made; the message says why."""


class TrainStation:
    """A turntable holding one car, a queue and a stack of cars, and a train."""

    def __init__(self) -> None:
        self._turntable: Deque[int] = Deque()
        self._queue: Deque[int] = Deque()
        self._stack: Deque[int] = Deque()
        self._train: list[int] = []

    def _take_turntable(self) -> int:
        if not len(self._turntable):
            raise StationError("Turntable empty!")
        return self._turntable.pop_front()

    def _require_free_turntable(self) -> None:
        if len(self._turntable):
            raise StationError("Turntable occupied!")

    def add_to_turntable(self, car: int) -> None:
        """Put a car on the empty turntable."""
        self._require_free_turntable()
        self._turntable.push_back(car)

    def add_to_queue(self) -> None:
        """Move the turntable car to the back of the queue."""
        self._queue.push_back(self._take_turntable())

    def add_to_stack(self) -> None:
        """Move the turntable car to the top of the stack."""
        self._stack.push_back(self._take_turntable())

    def remove_from_turntable(self) -> None:
        """Move the turntable car onto the end of the train."""
        self._train.append(self._take_turntable())

    def remove_from_queue(self) -> None:
        """Move the front car of the queue onto the turntable."""
        if not len(self._queue):
            raise StationError("Queue empty!")
        self._require_free_turntable()
        self._turntable.push_back(self._queue.pop_front())

    def remove_from_stack(self) -> None:
        """Move the top car of the stack onto the turntable."""
        if not len(self._stack):
            raise StationError("Stack empty!")
        self._require_free_turntable()
        self._turntable.push_back(self._stack.pop_back())

    def top_of_turntable(self) -> int:
        """The car on the turntable."""
        if not len(self._turntable):
            raise StationError("Turntable empty!")
        return self._turntable.front()

    def top_of_queue(self) -> int:
        """The car at the front of the queue."""
        if not len(self._queue):
            raise StationError("Queue empty!")
        return self._queue.front()

    def top_of_stack(self) -> int:
        """The car on top of the stack."""
        if not len(self._stack):
            raise StationError("Stack empty!")
        return self._stack.back()

    def size_of_queue(self) -> int:
        return len(self._queue)

    def size_of_stack(self) -> int:
        return len(self._stack)

    def train(self) -> list[int]:
        """The cars of the train, in order."""
        return list(self._train)

    def find(self, car: int) -> Optional[str]:
        """Where a car is, such as 'Queue[0]', or None if it is nowhere."""
        if len(self._turntable) and self._turntable.front() == car:
            return "Turntable"
        for label, cars in (("Queue", self._queue), ("Stack", self._stack), ("Train", self._train)):
            for index, candidate in enumerate(cars):
                if candidate == car:
                    return f"{label}[{index}]"
        return None


def _status(action) -> str:
    try:
        action()
    except StationError as error:
        return str(error)
    return "OK"


def _value(query) -> str:
    try:
        return str(query())
    except StationError as error:
        return str(error)


def _parse_car(text: str, line: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid car number in {line!r}") from None


def run_commands(lines: Iterable[str]) -> list[str]:
    """Run station commands and return the output lines they produce."""
    station = TrainStation()
    output: list[str] = []
    for raw in lines:
        line = raw.rstrip("\n")
        fields = line.split()
        if not fields:
            continue
        command = fields[0]
        result: Optional[str] = None
        if command == "Add:station":
            car = _parse_car(fields[1] if len(fields) > 1 else "", line)
            result = _status(lambda: station.add_to_turntable(car))
        elif command == "Add:queue":
            result = _status(station.add_to_queue)
        elif command == "Add:stack":
            result = _status(station.add_to_stack)
        elif command == "Remove:queue":
            result = _status(station.remove_from_queue)
        elif command == "Remove:station":
            result = _status(station.remove_from_turntable)
        elif command == "Remove:stack":
            result = _status(station.remove_from_stack)
        elif command == "Top:station":
            result = _value(station.top_of_turntable)
        elif command == "Top:queue":
            result = _value(station.top_of_queue)
        elif command == "Top:stack":
            result = _value(station.top_of_stack)
        elif command == "Size:queue":
            result = str(station.size_of_queue())
        elif command == "Size:stack":
            result = str(station.size_of_stack())
        elif command == "Train:":
            result = "".join(f" {car}" for car in station.train())
        elif command.startswith("Fi"):
            _, colon, number = command.partition(":")
            car = _parse_car(number if colon else command, line)
            result = station.find(car) or "Not Found!"
        output.append(line if result is None else f"{line} {result}")
    return output


def main(argv: list[str] | None = None) -> int:
    """Run the commands in an input file and write the results to an output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: trains INPUT OUTPUT", file=sys.stderr)
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