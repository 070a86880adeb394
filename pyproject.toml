[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsakit"
version = "0.1.0"
description = "Classic data structures and algorithms with small interactive menu programs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "avl",
    "binary-search-tree",
    "heap",
    "expression-tree",
    "graph",
    "minimum-spanning-tree",
    "optimal-bst",
    "indexed-file",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsakit-avl = "dsakit.avl:main"
dsakit-heap = "dsakit.heap:main"
dsakit-bst = "dsakit.bst:main"
dsakit-dictionary = "dsakit.dictionary:main"
dsakit-expression = "dsakit.expression:main"
dsakit-graph = "dsakit.graph:main"
dsakit-mst = "dsakit.mst:main"
dsakit-obst = "dsakit.obst:main"
dsakit-students = "dsakit.students:main"
dsakit-employees = "dsakit.employees:main"

[tool.hatch.build.targets.wheel]
packages = ["dsakit"]

[tool.pytest.ini_options]
addopts = "-ra"
