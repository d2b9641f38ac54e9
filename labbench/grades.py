"""Exam score report: per-exam averages and letter grades relative to them."""

from __future__ import annotations

import math
import re
import sys
from collections import Counter
from dataclasses import dataclass

_LETTERS = "ABCDE"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else math.nan


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _parse_score(text: str, line_number: int) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"line {line_number}: invalid score {text!r}")
    return float(match.group(1))


def grade_letter(score: float, average: float) -> str:
    """Letter grade for a score measured against an average."""
    difference = score - average
    if difference >= 14.999:
        return "A"
    if difference >= 5.001:
        return "B"
    if difference >= -5.0001:
        return "C"
    if difference >= -15.0001:
        return "D"
    return "E"


@dataclass
class Gradebook:
    """Student names with their scores, one row per student."""

    names: list[str]
    scores: list[list[float]]
    exam_count: int

    @property
    def exam_averages(self) -> list[float]:
        if not self.scores:
            return [math.nan] * self.exam_count
        return [_mean(list(column)) for column in zip(*self.scores)]

    @property
    def student_averages(self) -> list[float]:
        return [_mean(row) for row in self.scores]

    @property
    def class_average(self) -> float:
        return _mean(self.student_averages)


def parse_gradebook(text: str) -> Gradebook:
    """Parse a header 'students exams' followed by 'First Last score...' lines."""
    lines = text.splitlines()
    header = lines[0] if lines else ""
    head, _, tail = header.rpartition(" ")
    student_count = _leading_int(head)
    exam_count = _leading_int(tail)
    if student_count < 0 or exam_count < 0:
        raise ValueError(f"invalid counts in header {header!r}")

    names: list[str] = []
    scores: list[list[float]] = []
    for line_number in range(2, student_count + 2):
        line = lines[line_number - 1] if line_number <= len(lines) else ""
        fields = line.split()
        first, last = (fields + ["", ""])[:2]
        raw_scores = fields[2 : 2 + exam_count]
        if len(raw_scores) < exam_count:
            raise ValueError(
                f"line {line_number}: expected {exam_count} scores, got {len(raw_scores)}"
            )
        names.append(f"{first} {last}")
        scores.append([_parse_score(raw, line_number) for raw in raw_scores])
    return Gradebook(names, scores, exam_count)


def render_report(book: Gradebook) -> str:
    """Render the full score report."""
    exam_averages = book.exam_averages
    out = ["Student Scores:"]
    for name, row in zip(book.names, book.scores):
        out.append(f"{name:>20}" + "".join(f"{score:>7g}" for score in row))

    out.append("Exam Averages:")
    for number, average in enumerate(exam_averages, start=1):
        out.append(f"    Exam {number} Average ={average:7.1f}")

    out.append("Student Exam Grades:")
    tallies = [Counter() for _ in range(book.exam_count)]
    for name, row in zip(book.names, book.scores):
        cells = []
        for score, average, tally in zip(row, exam_averages, tallies):
            letter = grade_letter(score, average)
            tally[letter] += 1
            cells.append(f"{score:9.0f}({letter})")
        out.append(f"{name:>20}" + "".join(cells))

    out.append("Exam Grades:")
    for number, tally in enumerate(tallies, start=1):
        counts = "".join(f"{tally[letter]:>8}({letter})" for letter in _LETTERS)
        out.append(f"{'Exam':>8}{number:>3}" + counts)

    out.append("Student Final Grades:")
    overall = book.class_average
    for name, average in zip(book.names, book.student_averages):
        out.append(f"{name:>20}{average:9.1f}({grade_letter(average, overall)})")

    out.append(f"Class Average Score = {overall:.1f}")
    return "\n".join(out)


def main(argv: list[str] | None = None) -> int:
    """Read a gradebook file and write its report to another file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("usage: grades INPUT OUTPUT", file=sys.stderr)
        return 1
    with open(args[0], encoding="utf-8") as source:
        book = parse_gradebook(source.read())
    with open(args[1], "w", encoding="utf-8") as target:
        target.write(render_report(book))
    return 0


if __name__ == "__main__":
    sys.exit(main())