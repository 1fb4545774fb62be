[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgos"
version = "0.1.0"
description = "Small classic algorithm programs: command-chain graph search, hashed AVL client groups, string radix sort and a word translator"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "graph", "dfs", "avl", "hash table", "radix sort", "counting sort"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
command-chain = "classicalgos.command_chain:main"
client-groups = "classicalgos.client_groups:main"
radix-sort = "classicalgos.radix:main"
translator = "classicalgos.translator:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
