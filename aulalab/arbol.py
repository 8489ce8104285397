"""Binary search tree of integers with node-degree lookup."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

INITIAL_VALUES = (18, 11, 23, 7, 15, 20, 25, 13)


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())

    def _find(self, value: object) -> _Node | None:
        node = self._root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return node

    def insert(self, value: int) -> None:
        """Insert value unless it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def degree(self, value: int) -> int:
        """Return the number of children of the node holding value.

        Raises KeyError when value is not in the tree.
        """
        node = self._find(value)
        if node is None:
            raise KeyError(value)
        return (node.left is not None) + (node.right is not None)

    def in_order(self) -> list[int]:
        """Return the values in ascending order."""
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result


def is_valid_number(text: str) -> bool:
    """Tell whether text is a non-empty run of ASCII digits."""
    return bool(text) and all("0" <= char <= "9" for char in text)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError from None


def main(argv: Sequence[str] | None = None) -> int:
    """Build the sample tree and report node degrees for numbers the user enters."""
    write = sys.stdout.write
    tokens = _tokens(sys.stdin)
    tree = BinarySearchTree(INITIAL_VALUES)

    values = "".join(f"{value} " for value in tree.in_order())
    write(f"Valores del arbol (ordenados): {values}\n")

    try:
        while True:
            write("Ingrese un numero entero para calcular su grado en el arbol: ")
            text = _next(tokens)
            while not is_valid_number(text):
                write("Entrada invalida. Ingrese un numero entero positivo: ")
                text = _next(tokens)
            number = int(text)

            try:
                degree = tree.degree(number)
            except KeyError:
                write(f"El valor {number} no se encuentra en el arbol.\n")
            else:
                write(f"El grado del nodo con valor {number} es: {degree}\n")

            write("¿Desea buscar otro numero? (S/N): ")
            option = _next(tokens)
            while option not in ("S", "s", "N", "n"):
                write("Opcion invalida. Ingrese 'S' para continuar o 'N' para salir: ")
                option = _next(tokens)
            if option not in ("S", "s"):
                break
    except EOFError:
        write("\n")
        return 1

    write("Programa finalizado. Gracias por usar el sistema.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())