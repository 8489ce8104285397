"""Interactive classroom exercises on lists, queues, trees, graphs and magic squares."""

__version__ = "1.0.0"

__all__ = [
    "arbol",
    "busqueda",
    "cuadro",
    "grafo",
    "inventario",
    "ordenar",
    "pedidos",
]