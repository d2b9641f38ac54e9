"""Heat spreading across a square plate with fixed edge temperatures."""

from __future__ import annotations

import sys

DEFAULT_SIZE = 10
EDGE_TEMPERATURE = 100.0
TOLERANCE = 0.1
MAX_ITERATIONS = 4

Plate = list[list[float]]


def _boundary(row: int, col: int, size: int) -> float | None:
    """Fixed temperature of an edge cell, or None for an interior cell."""
    if col in (0, size - 1):
        return 0.0
    if row in (0, size - 1):
        return EDGE_TEMPERATURE
    return None


def initial_plate(size: int = DEFAULT_SIZE) -> Plate:
    """A plate with hot top and bottom edges and everything else at zero."""
    if size < 3:
        raise ValueError(f"plate size must be at least 3, got {size}")
    plate = []
    for row in range(size):
        cells = []
        for col in range(size):
            fixed = _boundary(row, col, size)
            cells.append(0.0 if fixed is None else fixed)
        plate.append(cells)
    return plate


def step(plate: Plate) -> Plate:
    """One relaxation pass: each interior cell becomes its neighbours' mean."""
    size = len(plate)
    if size < 3 or any(len(row) != size for row in plate):
        raise ValueError("plate must be square and at least 3 cells wide")
    result = []
    for row in range(size):
        cells = []
        for col in range(size):
            fixed = _boundary(row, col, size)
            if fixed is None:
                fixed = (
                    plate[row - 1][col]
                    + plate[row + 1][col]
                    + plate[row][col - 1]
                    + plate[row][col + 1]
                ) / 4
            cells.append(fixed)
        result.append(cells)
    return result


def format_plate(plate: Plate) -> str:
    """Render the plate as comma separated rows of fixed-width values."""
    return "".join(",".join(f"{value:9.3f}" for value in row) + "\n" for row in plate)


def _converged(old: Plate, new: Plate) -> bool:
    return all(
        abs(before - after) <= TOLERANCE
        for old_row, new_row in zip(old, new)
        for before, after in zip(old_row, new_row)
    )


def main(argv: list[str] | None = None) -> int:
    """Print the plate before and after relaxation passes."""
    print("Hotplate simulator\n")
    plate = initial_plate()
    print("Printing initial plate...")
    print(format_plate(plate), end="")

    current = step(plate)
    print("\nPrinting plate after one iteration...")
    print(format_plate(current), end="")

    for iteration in range(MAX_ITERATIONS):
        previous, current = current, step(current)
        if _converged(previous, current):
            break
        print(
            f"iterations = {iteration}[1] and [0]  is {current[0][1]:.3f}"
            f" [1] [1] = {current[1][1]:.3f}"
            f" [1] [2] = {current[2][1]:.3f}"
            f" [2] [1]= {current[1][2]:.3f}"
            f" [2] [2] = {current[2][2]:.3f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())