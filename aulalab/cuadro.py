"""Odd-order magic square generator."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_SIZE = 9
_LINE_LIMIT = MAX_SIZE
_RULE = "=============================================\n"


def magic_sum(n: int) -> int:
    """Return the common sum of every row, column and diagonal for order n."""
    return n * (n * n + 1) // 2


def magic_square(n: int) -> list[list[int]]:
    """Build an n x n magic square for odd n between 1 and MAX_SIZE.

    Numbers are placed moving up and to the left, dropping one row down
    when the target cell is already taken.
    """
    if n < 1 or n > MAX_SIZE or n % 2 == 0:
        raise ValueError("El tamano debe ser un numero impar entre 1 y 9.")
    square = [[0] * n for _ in range(n)]
    row, column = 0, n // 2
    for number in range(1, n * n + 1):
        square[row][column] = number
        next_row, next_column = (row - 1) % n, (column - 1) % n
        if square[next_row][next_column]:
            row = (row + 1) % n
        else:
            row, column = next_row, next_column
    return square


def is_valid_number(text: str) -> bool:
    """Tell whether text is a non-empty run of ASCII digits."""
    return bool(text) and all("0" <= char <= "9" for char in text)


def format_square(square: Sequence[Sequence[int]]) -> str:
    """Render the square as tab-separated rows."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in square)


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for an order n and print the magic square, its sum and its numbers."""
    write = sys.stdout.write
    write(_RULE)
    write("       Generador de Cuadrados Magicos\n")
    write(_RULE)
    write("Este programa genera un cuadrado magico de tamano n x n,\n")
    write("donde n es un numero impar entre 1 y 9.\n")
    write("Un cuadrado magico es una matriz en la que la suma de los\n")
    write("numeros en cada fila, columna y diagonal es la misma.\n")
    write(_RULE)

    write("\nIngrese el tamano del cuadrado magico (n): ")
    text = sys.stdin.readline().rstrip("\r\n")[:_LINE_LIMIT]

    if not is_valid_number(text):
        write("Error: Debe ingresar un numero entero valido.\n")
        return 1

    n = int(text)
    try:
        square = magic_square(n)
    except ValueError as error:
        write(f"Error: {error}\n")
        return 1

    write(f"\nCuadrado magico de tamano {n}x{n}:\n")
    write(format_square(square))
    write(f"\nLa suma magica es: {magic_sum(n)}\n")
    numbers = "".join(f"{number} " for number in range(1, n * n + 1))
    write(f"\nElementos en la lista enlazada: {numbers}\n")

    write("\n" + _RULE)
    write("Gracias por usar el Generador de Cuadrados Magicos\n")
    write(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())