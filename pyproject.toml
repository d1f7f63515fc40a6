[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dspractice"
version = "0.1.0"
description = "Classic data structures and algorithms: lists, stacks, queues, trees, graphs, sorting and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "binary tree",
    "huffman",
    "graph",
    "sorting",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dspractice"]

[tool.pytest.ini_options]
addopts = "-ra"
