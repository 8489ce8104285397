"""Branch inventories: element-wise interleaving and difference."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INPUT_ERROR = "Error: Ingrese solo numeros enteros.\n"

_INT_PREFIX = re.compile(r"[+-]?\d+")
_MISSING = object()

Reader = Callable[[], str]
Writer = Callable[[str], object]


def interleave(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Alternate items of a and b; the longer list's tail follows at the end."""
    return [
        value
        for pair in zip_longest(a, b, fillvalue=_MISSING)
        for value in pair
        if value is not _MISSING
    ]


def subtract(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Subtract b from a item by item, treating missing items as zero."""
    return [left - right for left, right in zip_longest(a, b, fillvalue=0)]


def read_int(read: Reader, write: Writer, message: str) -> int:
    """Show message and read a 32-bit integer, asking again on bad input."""
    while True:
        write(message)
        line = read()
        while not line.strip():
            line = read()
        match = _INT_PREFIX.match(line.lstrip())
        if match:
            value = int(match.group())
            if INT_MIN <= value <= INT_MAX:
                return value
        write(INPUT_ERROR)


def fill_inventory(read: Reader, write: Writer, count: int) -> list[int]:
    """Read count product quantities from the user."""
    return [
        read_int(read, write, f"Cantidad producto [{position}]: ")
        for position in range(1, count + 1)
    ]


def format_list(label: str, values: Iterable[int]) -> str:
    """Render label followed by each value and a space, ending the line."""
    return label + "".join(f"{value} " for value in values) + "\n"


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Read two branch inventories and show them interleaved and subtracted."""
    read, write = _read_stdin, _write_stdout
    write("=== SISTEMA DE INVENTARIO (SUCURSALES) ===\n")
    try:
        count_a = read_int(read, write, "\nIngrese numero de productos para Sucursal A: ")
        branch_a = fill_inventory(read, write, count_a)
        count_b = read_int(read, write, "\nIngrese numero de productos para Sucursal B: ")
        branch_b = fill_inventory(read, write, count_b)
    except EOFError:
        write("\n")
        return 1

    write("\n-- INVENTARIOS --\n")
    write(format_list("Sucursal A: ", branch_a))
    write(format_list("Sucursal B: ", branch_b))

    write("\n-- INVENTARIO INTERCALADO --\n")
    write(format_list("Intercalado: ", interleave(branch_a, branch_b)))

    write("\n-- DIFERENCIA DE INVENTARIO (A - B) --\n")
    write(format_list("Diferencia: ", subtract(branch_a, branch_b)))

    write("\nPrograma finalizado correctamente.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())