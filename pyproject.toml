[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbench"
version = "0.1.0"
description = "Classic data structures: binary search trees, disjoint sets, linked stacks and lists, Huffman trees and threaded binary trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "binary search tree",
    "disjoint set",
    "union find",
    "linked list",
    "stack",
    "huffman",
    "threaded binary tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsworkbench-bst = "dsworkbench.bstree:main"
dsworkbench-dsu = "dsworkbench.disjoint_set:main"
dsworkbench-stack = "dsworkbench.linked_stack:main"
dsworkbench-list = "dsworkbench.linked_list:main"
dsworkbench-huffman-table = "dsworkbench.huffman_table:main"
dsworkbench-huffman-codes = "dsworkbench.huffman_codes:main"
dsworkbench-threaded = "dsworkbench.threaded_tree:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworkbench"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
