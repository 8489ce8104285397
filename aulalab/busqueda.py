"""Random number list with quicksort, binary search and an interactive lookup."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

LIST_SIZE = 999
MIN_VALUE = 0.0
MAX_VALUE = 2000.0
TOLERANCE = 0.0001
SAMPLE_SIZE = 20

Reader = Callable[[], str]
Writer = Callable[[str], object]


def quicksort(values: Iterable[float]) -> list[float]:
    """Return the values sorted, partitioning around the last element of each segment.

    Elements smaller than the pivot keep their relative order before it, all
    others keep their relative order after it.
    """
    result: list[float] = []
    pending: list[tuple[bool, list[float]]] = [(False, list(values))]
    while pending:
        settled, segment = pending.pop()
        if settled or len(segment) <= 1:
            result.extend(segment)
            continue
        pivot = segment[-1]
        rest = segment[:-1]
        lower = [value for value in rest if value < pivot]
        upper = [value for value in rest if not value < pivot]
        pending.append((False, upper))
        pending.append((True, [pivot]))
        pending.append((False, lower))
    return result


def binary_search(values: Sequence[float], target: float) -> bool:
    """Tell whether a value within TOLERANCE of target is in the sorted values."""
    if not values:
        return False
    low, high = 0, len(values) - 1
    while low < high:
        middle = low + (high - low - 1) // 2
        if abs(values[middle] - target) < TOLERANCE:
            return True
        if values[middle] < target:
            low = middle + 1
        else:
            high = middle
    return abs(values[low] - target) < TOLERANCE


class NumberList:
    """An ordered collection of floating point numbers."""

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._values: list[float] = [float(value) for value in values]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def insert(self, value: float) -> None:
        """Append a value at the end."""
        self._values.append(float(value))

    def generate(self, rng: random.Random | None = None) -> None:
        """Append LIST_SIZE random values between MIN_VALUE and MAX_VALUE."""
        rng = rng if rng is not None else random.Random()
        for _ in range(LIST_SIZE):
            self.insert(rng.uniform(MIN_VALUE, MAX_VALUE))

    def sort(self) -> None:
        """Sort the values in ascending order."""
        self._values = quicksort(self._values)

    def contains(self, value: float) -> bool:
        """Binary-search the (sorted) values for one close to value."""
        return binary_search(self._values, value)

    def sample(self, n: int = SAMPLE_SIZE) -> list[float]:
        """Return the first n values."""
        return self._values[: max(n, 0)]


def result_message(number: float, found: bool) -> str:
    """Describe whether number was found in the list."""
    verdict = "SI" if found else "NO"
    return f"El numero {number:f} {verdict} existe en la lista."


def _format_sample(values: Sequence[float], n: int) -> str:
    shown = "".join(f"{value:g} " for value in values)
    return f"Muestra de la lista ({n} elementos):\n{shown}\n"


def _next_token(read: Reader) -> str:
    while True:
        tokens = read().split()
        if tokens:
            return tokens[0]


def prompt_number(read: Reader, write: Writer) -> float:
    """Ask until a number between MIN_VALUE and MAX_VALUE is given."""
    while True:
        write(f"Ingrese un numero entre {MIN_VALUE:g} y {MAX_VALUE:g}: ")
        token = _next_token(read)
        try:
            number = float(token)
        except ValueError:
            number = None
        if number is not None and MIN_VALUE <= number <= MAX_VALUE:
            return number
        write("Error: Entrada invalida. Intente de nuevo.\n")


def ask_continue(read: Reader, write: Writer) -> bool:
    """Ask whether to search again; True for 'S', False for 'N'."""
    while True:
        write("\n¿Desea realizar otra busqueda? (S/N): ")
        answer = _next_token(read)[0].upper()
        if answer in ("S", "N"):
            return answer == "S"
        write("Error: Ingrese 'S' para continuar o 'N' para salir.\n")


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Generate, sort and repeatedly search a list of random numbers."""
    parser = argparse.ArgumentParser(
        description="Busqueda binaria sobre una lista de numeros aleatorios."
    )
    parser.add_argument("--seed", type=int, default=None, help="semilla aleatoria")
    args = parser.parse_args(argv)

    read, write = _read_stdin, _write_stdout
    numbers = NumberList()
    numbers.generate(random.Random(args.seed))
    write("=== LISTA GENERADA ===\n")
    write(_format_sample(numbers.sample(), SAMPLE_SIZE))

    numbers.sort()
    write("\n=== LISTA ORDENADA ===\n")
    write(_format_sample(numbers.sample(), SAMPLE_SIZE))

    try:
        while True:
            number = prompt_number(read, write)
            write("\n=== RESULTADOS ===\n")
            write(result_message(number, numbers.contains(number)) + "\n")
            if not ask_continue(read, write):
                break
    except EOFError:
        write("\n")
        return 1

    write("\nPrograma finalizado. Gracias por usar el sistema!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())