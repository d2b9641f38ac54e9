"""A small interactive text editor: sentence fixing, insertion, find and copy."""

from __future__ import annotations

import sys

_SENTENCE_ENDINGS = ".?!"


def make_sentence(text: str) -> str:
    """Capitalise the first letter and add a period if no ending mark is present."""
    if not text:
        raise ValueError("text is empty")
    result = text[0].upper() + text[1:]
    if not any(mark in result for mark in _SENTENCE_ENDINGS):
        result += "."
    return result


def insert_text(text: str, addition: str, position: int) -> str:
    """Insert ``addition`` before ``position``; the position may equal the length."""
    if not 0 <= position <= len(text):
        raise ValueError(
            "No change made. Position must be non-negative and not exceed "
            f"{len(text)}, the length of the current text."
        )
    return text[:position] + addition + text[position:]


def find_substring(text: str, substring: str) -> int | None:
    """Position of the first occurrence of ``substring``, or None."""
    position = text.find(substring)
    return None if position < 0 else position


def replace_substring(text: str, substring: str, replacement: str) -> str:
    """Replace the first occurrence of ``substring``."""
    position = find_substring(text, substring)
    if position is None:
        raise ValueError(f"{substring} was not found. No change made.")
    return text[:position] + replacement + text[position + len(substring):]


def delete_substring(text: str, substring: str) -> str:
    """Delete the first occurrence of ``substring``."""
    return replace_substring(text, substring, "")


def copy_paste(text: str, position: int, length: int, paste_position: int) -> str:
    """Duplicate ``length`` characters starting at ``position``.

    The copy is inserted at ``position`` itself; ``paste_position`` only has
    to lie inside the text.
    """
    size = len(text)
    valid = (
        0 <= position < size
        and 0 < length < size - position
        and 0 <= paste_position < size
    )
    if not valid:
        raise ValueError("Values entered do not support copy/paste.")
    return text[:position] + text[position:position + length] + text[position:]


def _ask_line(prompt: str) -> str:
    print(prompt)
    return input()


def _ask_word(prompt: str) -> str:
    print(prompt)
    words = input().split()
    return words[0] if words else ""


def _ask_ints(prompt: str, count: int) -> list[int]:
    print(prompt)
    tokens: list[str] = []
    while len(tokens) < count:
        tokens.extend(input().split())
    try:
        return [int(token) for token in tokens[:count]]
    except ValueError:
        raise ValueError(f"expected {count} whole numbers") from None


def _edit(text: str) -> str:
    if _ask_word("Do you want to make this string a sentence (y/n)?").startswith("y"):
        text = make_sentence(text)
        print(text)

    if _ask_word("Do you want to insert more text into your current text (y/n)?").startswith("y"):
        addition = _ask_line("Enter text to be inserted: ")
        (position,) = _ask_ints("Enter position where text is to be inserted: ", 1)
        try:
            text = insert_text(text, addition, position)
            print(text)
        except ValueError as error:
            print(error)

    choice = _ask_word("If you would like to find/replace or copy/paste, enter find or copy: ")
    if choice.startswith("f"):
        substring = _ask_line("Enter substring to find: ")
        action = _ask_word(
            "Do you want to find if/where the substring occurs, delete it, "
            "or replace it (find, delete, replace)?"
        )
        if action.startswith("f"):
            position = find_substring(text, substring)
            if position is None:
                print(f"{substring} was not found.")
            else:
                print(f"{substring} was found at position {position}.")
        elif action.startswith("d"):
            try:
                text = delete_substring(text, substring)
            except ValueError as error:
                print(error)
        elif action.startswith("r"):
            if find_substring(text, substring) is None:
                print(f"{substring} was not found. No change made.")
            else:
                replacement = _ask_line("Enter replacement string: ")
                text = replace_substring(text, substring, replacement)
    else:
        position, length, paste = _ask_ints(
            "Enter position and length of text to be copied, and position for paste: ", 3
        )
        try:
            text = copy_paste(text, position, length, paste)
        except ValueError as error:
            print(error)
    return text


def main(argv: list[str] | None = None) -> int:
    """Run one interactive editing session."""
    try:
        print("Welcome to the Simple Editor. Enter a string to be edited: ")
        text = input()
        print(text)
        text = _edit(text)
    except (EOFError, ValueError) as error:
        print(f"editing stopped: {error}", file=sys.stderr)
        return 1
    print("Final text is ")
    print(text, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())