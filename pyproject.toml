[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aulalab"
version = "1.0.0"
description = "Small interactive classroom exercises on lists, queues, trees, graphs and magic squares"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data structures",
    "algorithms",
    "binary search",
    "quicksort",
    "selection sort",
    "floyd-warshall",
    "binary search tree",
    "magic square",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aulalab-busqueda = "aulalab.busqueda:main"
aulalab-ordenar = "aulalab.ordenar:main"
aulalab-grafo = "aulalab.grafo:main"
aulalab-arbol = "aulalab.arbol:main"
aulalab-cuadro = "aulalab.cuadro:main"
aulalab-pedidos = "aulalab.pedidos:main"
aulalab-inventario = "aulalab.inventario:main"

[tool.hatch.build.targets.wheel]
packages = ["aulalab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["aulalab"]
