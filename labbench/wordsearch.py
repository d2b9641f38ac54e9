"""Word-search puzzle solver: finds words in straight lines in any of 8 directions."""

from __future__ import annotations

import sys

END_MARKER = "-1"

Position = tuple[int, int]
Direction = tuple[int, int]

_DIRECTIONS = [(dy, dx) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy]


def validate_grid(lines: list[str]) -> list[str]:
    """Return the puzzle lines, checking that they all have the same length."""
    grid = list(lines)
    if grid and any(len(line) != len(grid[0]) for line in grid):
        raise ValueError(
            "Sorry, we found that your inputs weren't of consistent length "
            "this program won't work"
        )
    return grid


def _spells(grid: list[str], word: str, start: Position, direction: Direction) -> bool:
    row, col = start
    dy, dx = direction
    for offset, letter in enumerate(word):
        r, c = row + offset * dy, col + offset * dx
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])) or grid[r][c] != letter:
            return False
    return True


def find_word(grid: list[str], word: str) -> list[tuple[Position, Direction]]:
    """Every place the word occurs, as (start, (row step, column step)).

    A one-letter word is reported with direction (0, 0).
    """
    if not word:
        raise ValueError("word must not be empty")
    matches: list[tuple[Position, Direction]] = []
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != word[0]:
                continue
            if len(word) == 1:
                matches.append(((row, col), (0, 0)))
                continue
            matches.extend(
                ((row, col), direction)
                for direction in _DIRECTIONS
                if _spells(grid, word, (row, col), direction)
            )
    return matches


def main(argv: list[str] | None = None) -> int:
    """Read a puzzle line by line, then search for words until the end marker."""
    print("Welcome to the word search solver")
    print("Please enter each line of the puzzle to begin")
    print(f'Enter "{END_MARKER}" to end entry of lines')

    lines: list[str] = []
    while True:
        try:
            line = input(f"Please Enter the number {len(lines) + 1} line of the puzzle: ")
        except EOFError:
            break
        if line == END_MARKER:
            break
        lines.append(line)

    try:
        grid = validate_grid(lines)
    except ValueError as error:
        print(error)
        return 1

    print("ENTRY COMPLETE")
    print("This should be the data you entered")
    for line in grid:
        print(line)
    print()

    while True:
        try:
            word = input("Enter the word you would like to find: ")
        except EOFError:
            break
        if word == END_MARKER:
            break
        try:
            found = find_word(grid, word)
        except ValueError as error:
            print(error)
            continue
        if found:
            print("WE FOUND A MATCH")
    return 0


if __name__ == "__main__":
    sys.exit(main())