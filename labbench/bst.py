"""Binary search tree with level-order printing, and a runner for command files."""

from __future__ import annotations

import sys
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[_Node[T]] = None
        self.right: Optional[_Node[T]] = None


def _render_level(node: Optional[_Node[T]], level: int, parts: list[str]) -> bool:
    """Append the values on one level; return True if a deeper level exists."""
    if node is None:
        return False
    if level == 1:
        parts.append(f" {node.value}")
        return node.left is not None or node.right is not None
    if level == 2 and node.left is None and node.right is not None:
        parts.append(" _")
    left = _render_level(node.left, level - 1, parts)
    right = _render_level(node.right, level - 1, parts)
    if level == 2 and node.left is not None and node.right is None:
        parts.append(" _")
    return left or right


class BinarySearchTree(Generic[T]):
    """An unbalanced binary search tree holding distinct values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node[T]] = None
        for value in values:
            self.add(value)

    def add(self, value: T) -> bool:
        """Insert a value; return False if it was already present."""
        if self._root is None:
            self._root = _Node(value)
            return True
        node = self._root
        while True:
            if value == node.value:
                return False
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(value)
                    return True
                node = node.right

    def remove(self, value: T) -> bool:
        """Remove a value; return False if it was not present.

        An inner node takes the value of its in-order predecessor (or, with
        no left subtree, its successor), and that node is removed in turn.
        """
        parent: Optional[_Node[T]] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return False

        while True:
            if node.left is not None:
                parent, child = node, node.left
                while child.right is not None:
                    parent, child = child, child.right
            elif node.right is not None:
                parent, child = node, node.right
                while child.left is not None:
                    parent, child = child, child.left
            else:
                self._detach(node, parent)
                return True
            node.value = child.value
            node = child

    def _detach(self, node: _Node[T], parent: Optional[_Node[T]]) -> None:
        if parent is None:
            self._root = None
        elif parent.left is node:
            parent.left = None
        else:
            parent.right = None

    def clear(self) -> None:
        """Remove every value."""
        self._root = None

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def __len__(self) -> int:
        count = 0
        pending = [self._root] if self._root is not None else []
        while pending:
            node = pending.pop()
            count += 1
            pending.extend(child for child in (node.left, node.right) if child is not None)
        return count

    def __str__(self) -> str:
        if self._root is None:
            return "empty"
        lines = []
        level = 0
        while True:
            level += 1
            parts: list[str] = []
            deeper = _render_level(self._root, level, parts)
            lines.append(f"  {level}:" + "".join(parts))
            if not deeper:
                return "\n".join(lines)


_TREE_COMMANDS = {"add", "remove", "clear", "size", "print", "find"}


def run_commands(lines: Iterable[str]) -> list[str]:
    """Run tree commands and return the output lines they produce.

    ``INT`` and ``STRING`` start a new tree of integers or strings; the
    other commands act on the current tree.
    """
    tree: Optional[BinarySearchTree] = None
    int_mode = False
    out: list[str] = []
    for raw in lines:
        line = raw.rstrip("\n")
        fields = line.split()
        command = fields[0] if fields else ""
        argument = fields[1] if len(fields) > 1 else ""
        out.append(line)

        if command in ("INT", "STRING"):
            int_mode = command == "INT"
            tree = BinarySearchTree()
            out.append(" true\n")
            continue
        if command not in _TREE_COMMANDS:
            continue
        if tree is None:
            raise ValueError(f"no tree selected before {line!r}")

        value: object = argument
        if int_mode and command in ("add", "remove", "find"):
            try:
                value = int(argument)
            except ValueError:
                raise ValueError(f"invalid number in {line!r}") from None

        if command == "add":
            out.append(f" {str(tree.add(value)).lower()}\n")
        elif command == "remove":
            out.append(f" {str(tree.remove(value)).lower()}\n")
        elif command == "clear":
            tree.clear()
            out.append(" true\n")
        elif command == "size":
            out.append(f" {len(tree)}\n")
        elif command == "print":
            out.append(f":\n{tree}\n" if len(tree) else ": empty\n")
        elif command == "find":
            out.append(" found\n" if value in tree else " not found\n")
    return "".join(out).splitlines()


def main(argv: list[str] | None = None) -> int:
    """Run the commands in an input file and write the results to an output file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(" insuffiecient args", file=sys.stderr)
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