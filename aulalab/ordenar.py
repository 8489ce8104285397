"""Interactive sorting of integer lists with a recursive-style selection sort."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INPUT_ERROR = "Por favor ingrese solo numeros enteros.\n"
CONTINUE_PROMPT = "\n¿Desea realizar otra operacion? (1: Si / 0: No): "
CHOICE_ERROR = "Error: Ingrese 1 para Sí o 0 para No.\n"

_INT_PREFIX = re.compile(r"[+-]?\d+")

Reader = Callable[[], str]
Writer = Callable[[str], object]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by repeatedly swapping the minimum to the front."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def prompt_int(read: Reader, write: Writer, message: str) -> int:
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


def wants_to_continue(read: Reader, write: Writer) -> bool:
    """Ask whether to sort another list; 1 means yes, 0 means no."""
    while True:
        choice = prompt_int(read, write, CONTINUE_PROMPT)
        if choice in (0, 1):
            return choice == 1
        write(CHOICE_ERROR)


def _format_list(label: str, values: Sequence[int]) -> str:
    return label + "".join(f"{value} " for value in values) + "\n"


def run_sort(read: Reader, write: Writer) -> tuple[list[int], list[int]]:
    """Read a list from the user, show it and its sorted form; return both."""
    count = prompt_int(read, write, "Por favor, indique cuantos elementos desea ordenar: ")
    write("Ingrese los elementos (uno por uno):\n")
    original = [
        prompt_int(read, write, f"Elemento {position}: ")
        for position in range(1, count + 1)
    ]
    write(_format_list("\nLista original: ", original))
    ordered = selection_sort(original)
    write(_format_list("Lista ordenada: ", ordered))
    return original, ordered


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Sort lists entered by the user until they choose to stop."""
    read, write = _read_stdin, _write_stdout
    write("=== ORDENADOR DE LISTAS ===\n")
    try:
        while True:
            run_sort(read, write)
            if not wants_to_continue(read, write):
                break
    except EOFError:
        write("\n")
        return 1
    write("Programa finalizado. ¡Gracias por usar nuestro servicio!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())