# labbench

A collection of small, self-contained programs and data structures of the
kind met in an introductory programming course. Each one is usable as a
library from Python, and most can also be run from the command line. There
are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line programs

| Command | What it does |
| --- | --- |
| `labbench-tokenize FILE` | Scans a Datalog-style source file and prints one token per line, followed by `Total Tokens = N`. |
| `labbench-grades INPUT OUTPUT` | Reads a gradebook and writes a report with exam averages, letter grades per exam, grade tallies, final grades and the class average. |
| `labbench-quicksort INPUT OUTPUT` | Runs a script of quicksort commands and writes one result line per command. |
| `labbench-bst INPUT OUTPUT` | Runs a script of binary-search-tree commands and writes the results. |
| `labbench-trains INPUT OUTPUT` | Runs a script of train-yard commands (turntable, queue siding, stack siding, train) and writes the results. |
| `labbench-hotplate` | Prints a 10×10 hot-plate simulation: the initial plate, the plate after one pass, then a summary line for each further pass (at most four) until the plate settles. |
| `labbench-pizza` | Asks for a guest count and a tip figure, then prints how many large, medium and small pizzas to order, their area and the cost. |
| `labbench-editor` | An interactive session on one line of text: make it a sentence, insert text, then find, delete or replace a substring, or copy and paste. |
| `labbench-wordsearch` | Reads a word-search grid line by line until `-1`, then reads words until `-1` and reports whether each is found. |

The file-driven commands return exit status 1 and print a message on
standard error when they are given too few arguments, cannot read or write a
file, or meet a malformed number.

### Input formats

**Gradebook** (`labbench-grades`): the first line is `STUDENTS EXAMS`; each
following line is `First Last score score ...`.

**Quicksort script**: one command per line:
`QuickSort CAPACITY`, `Capacity`, `Clear`, `AddToArray N N ...`, `Size`,
`PrintArray`, `MedianOfThree LEFT RIGHT`, `Partition LEFT RIGHT PIVOT`,
`SortAll`, `Sort LEFT RIGHT`. Ranges are half-open (`RIGHT` is one past the
end). `MedianOfThree` and `Partition` print `-1` for an invalid range;
`Sort` prints `Error`.

**Tree script**: `INT` or `STRING` starts a new tree of that kind; then
`add X`, `remove X`, `find X`, `size`, `print` and `clear`. Each input line is
echoed, followed by the result.

**Train-yard script**: `Add:station N`, `Add:queue`, `Add:stack`,
`Remove:station`, `Remove:queue`, `Remove:stack`, `Top:station`,
`Top:queue`, `Top:stack`, `Size:queue`, `Size:stack`, `Train:` and
`Find:N`. Each input line is echoed followed by `OK`, a value, or a message
such as `Turntable empty!` or `Not Found!`.

## Library use

### Tokenizer (`labbench.tokenizer`)

```python
from labbench.tokenizer import tokenize, format_tokens, TokenType

tokens = tokenize("Schemes: snap(S,N,A,P)")
assert tokens[0].kind is TokenType.SCHEMES
print(format_tokens(tokens))
```

A `Token` has `kind`, `value` and `line`, and prints as `(TYPE,"value",line)`.
Keywords are `Schemes`, `Facts`, `Rules` and `Queries`; strings use single
quotes (`''` inside a string is a quote), `#` starts a line comment and
`#| ... |#` a block comment. An unterminated string or block comment becomes
an `UNDEFINED` token, as does any unknown character. The last token is
always `EOF`.

### Grades (`labbench.grades`)

```python
from labbench.grades import parse_gradebook, render_report, grade_letter

with open("scores.txt") as f:
    book = parse_gradebook(f.read())
print(render_report(book))
grade_letter(90.0, 75.0)   # 'A'
```

`Gradebook` holds `names`, `scores` and `exam_count`, with `exam_averages`,
`student_averages` and `class_average` properties. `grade_letter` grades a
score against an average: 15 or more above is A, more than 5 above is B,
within 5 is C, within 15 below is D, anything lower is E.
`parse_gradebook` raises `ValueError` for missing or invalid scores.

### Quicksort (`labbench.quicksort`)

```python
from labbench.quicksort import QuickSort

qs = QuickSort(4)
for n in (5, 3, 9, 1):
    qs.add_element(n)
qs.sort_all()
print(qs)          # 1,3,5,9
len(qs)            # 4
qs.capacity        # doubles as elements are added
qs.comparisons, qs.swaps
```

`create_array(capacity)` empties the array with a new capacity; `clear()`
empties it and keeps the capacity. `median_of_three(left, right)`,
`partition(left, right, pivot_index)` and `sort(left, right)` work on the
half-open range `[left, right)` and raise `IndexError` for an invalid range.
`run_commands(lines)` runs a quicksort script and returns the output lines.

### Binary search tree (`labbench.bst`)

```python
from labbench.bst import BinarySearchTree

tree = BinarySearchTree([8, 3, 10])
tree.add(3)        # False: already present
3 in tree          # True
len(tree)          # 3
print(tree)        # "  1: 8" / "  2: 3 10", one level per line
tree.remove(8)     # True
tree.clear()
```

Values are kept distinct. Printing lists the tree level by level, with `_`
standing for a missing child of a node that has one child. An empty tree
prints as `empty`. `run_commands(lines)` runs a tree script.

### Train yard (`labbench.trains`)

```python
from labbench.trains import Deque, TrainStation, StationError

station = TrainStation()
station.add_to_turntable(7)
station.add_to_queue()
station.find(7)              # 'Queue[0]'
station.size_of_queue()      # 1
station.top_of_stack()       # raises StationError('Stack empty!')
```

Moves that cannot be made raise `StationError` with a message such as
`Turntable occupied!`. `find` returns `'Turntable'`, `'Queue[i]'`,
`'Stack[i]'`, `'Train[i]'` or `None`; `train()` returns the cars of the
train in order. `Deque` offers `push_front`, `push_back`, `pop_front`,
`pop_back`, `front`, `back`, indexing, iteration and `len`; popping or
peeking an empty deque raises `IndexError`. `run_commands(lines)` runs a
train-yard script.

### Smaller pieces

- `labbench.hotplate`: `initial_plate(size=10)`, `step(plate)` (one
  relaxation pass) and `format_plate(plate)`.
- `labbench.pizza`: `plan_order(guests)` returns a `PizzaOrder` (one large
  per 7 guests, one medium per 3 of the rest, smalls for the remainder) with
  `total_area` and `area_per_guest`; `total_cost(order, tip)` multiplies the
  price by the tip figure as given.
- `labbench.editor`: `make_sentence`, `insert_text`, `find_substring`,
  `delete_substring`, `replace_substring` and `copy_paste`; invalid
  positions or missing substrings raise `ValueError`.
- `labbench.wordsearch`: `validate_grid(lines)` checks that all lines have
  the same length; `find_word(grid, word)` returns every
  `(start, direction)` at which the word lies in one of the eight directions.
- `labbench.exercises`: `power_of_two`, `swap_first_two`, `is_palindrome`,
  `remove_duplicates` (collapses runs of equal neighbours), `staircase`,
  `repeat_digits`, the `Student` record, and `run_roster(lines)`, which runs
  `add NAME GPA`, `print`, `drop INDEX` and `quit` commands and returns the
  session text.

## What it does not do

- `labbench.exercises` has no command-line program; its functions are for
  use from Python only.
- The word-search command only says whether a word was found; the positions
  and directions are available from `find_word`.
- Nothing is stored between runs: the interactive programs keep their state
  only for one session, and the script runners start from an empty
  structure each time.