[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedlists"
version = "0.1.0"
description = "Singly linked stack, persistent list and doubly linked deque containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "stack", "deque", "persistent", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkedlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
