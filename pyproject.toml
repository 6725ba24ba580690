[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgos"
version = "0.1.0"
description = "Classic data structures and algorithms: sorting, infix expressions, linked lists and grids."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "linked-list",
    "infix",
    "postfix",
    "expression-evaluation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dsalgos-grid = "dsalgos.grid:main"
dsalgos-linkedlist = "dsalgos.linkedlist:main"
dsalgos-expr = "dsalgos.expression:main"
dsalgos-sort = "dsalgos.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
