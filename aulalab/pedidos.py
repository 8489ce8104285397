"""Burger shop order queue with validated customer input."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

EMPTY_QUEUE = "No hay pedidos en la cola."

BURGERS = {
    "A": "Hamburguesa Clasica",
    "B": "Hamburguesa con Queso",
    "C": "Hamburguesa Doble Carne",
    "D": "Hamburguesa Vegetariana",
    "E": "Hamburguesa Especial",
}

_BURGER_MENU = (
    "\n--- Menu de Hamburguesas ---\n"
    + "".join(f"{letter}. {burger}\n" for letter, burger in BURGERS.items())
    + "Ingrese la letra de la hamburguesa que desea pedir: "
)

_MAIN_MENU = (
    "\n===== SISTEMA DE PEDIDOS =====\n"
    "1. Agregar pedido\n"
    "2. Mostrar pedidos en cola\n"
    "3. Salir\n"
    "Seleccione una opcion: "
)

Reader = Callable[[], str]
Writer = Callable[[str], object]


@dataclass(frozen=True)
class Order:
    """A customer's order."""

    name: str
    cedula: str
    burger: str


class OrderQueue:
    """First-in first-out queue of orders."""

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: deque[Order] = deque(orders)

    def __len__(self) -> int:
        return len(self._orders)

    def __iter__(self) -> Iterator[Order]:
        return iter(self._orders)

    def enqueue(self, order: Order) -> None:
        """Add an order at the back of the queue."""
        self._orders.append(order)

    def is_empty(self) -> bool:
        """Tell whether the queue holds no orders."""
        return not self._orders

    def describe(self) -> str:
        """Render every order on its own line, front first."""
        if self.is_empty():
            return EMPTY_QUEUE + "\n"
        return "".join(
            f"- Hamburguesa: {order.burger}, Cliente: {order.name} "
            f"(Cedula: {order.cedula})\n"
            for order in self._orders
        )


def is_valid_name(name: str) -> bool:
    """Tell whether name holds only ASCII letters and spaces."""
    return all(char == " " or (char.isascii() and char.isalpha()) for char in name)


def is_valid_id(cedula: str) -> bool:
    """Tell whether cedula holds only ASCII digits."""
    return all("0" <= char <= "9" for char in cedula)


def burger_for(letter: str) -> str | None:
    """Return the burger named by a menu letter, or None for an unknown letter."""
    return BURGERS.get(letter.upper())


def _read_line(read: Reader) -> str:
    return read().rstrip("\r\n")


def _next_token(read: Reader) -> str:
    while True:
        tokens = read().split()
        if tokens:
            return tokens[0]


def take_order(read: Reader, write: Writer) -> Order:
    """Ask for name, id and burger until each is valid; return the order."""
    while True:
        write("\nIngrese su nombre: ")
        name = _read_line(read)
        if is_valid_name(name):
            break
        write("Nombre invalido. Intente de nuevo.\n")

    while True:
        write("Ingrese su cedula: ")
        cedula = _read_line(read)
        if is_valid_id(cedula):
            break
        write("Cedula invalida. Intente de nuevo.\n")

    while True:
        write(_BURGER_MENU)
        burger = burger_for(_next_token(read)[0])
        if burger is not None:
            break
        write("Letra invalida. Por favor elija una opcion existente del menu.\n")

    write(f"Pedido agregado: {burger} para {name}\n")
    return Order(name, cedula, burger)


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the order menu until the user chooses to leave."""
    read, write = _read_stdin, _write_stdout
    queue = OrderQueue()
    try:
        while True:
            write(_MAIN_MENU)
            token = _next_token(read)
            try:
                option = int(token)
            except ValueError:
                option = None
            if option == 1:
                queue.enqueue(take_order(read, write))
            elif option == 2:
                write("\n--- Pedidos en Cola ---\n")
                write(queue.describe())
            elif option == 3:
                write("Gracias por usar el sistema. Hasta luego!\n")
                return 0
            else:
                write("Opcion invalida. Intente nuevamente.\n")
    except EOFError:
        write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())