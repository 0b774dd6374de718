[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsbasics"
version = "0.1.0"
description = "Classic data structures and algorithms: arrays, lists, stacks, queues, trees, heaps, hash tables, shortest paths and LSH"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "heap",
    "binary search tree",
    "hash table",
    "shortest paths",
    "locality-sensitive hashing",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsbasics-lsh = "dsbasics.lsh:main"

[tool.hatch.build.targets.wheel]
packages = ["dsbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
