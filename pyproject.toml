[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gogu"
version = "0.1.0"
description = "Collection helpers, function utilities and generic data structures: trees, heaps, caches and linked lists."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "collections",
    "data-structures",
    "cache",
    "lru",
    "heap",
    "btree",
    "binary-search-tree",
    "linked-list",
    "debounce",
    "throttle",
    "retry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gogu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
