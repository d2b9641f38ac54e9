[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labbench"
version = "0.1.0"
description = "Classic programming-lab exercises: a token scanner, grade reports, quicksort, binary search trees, a train yard and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "algorithms",
    "quicksort",
    "binary-search-tree",
    "deque",
    "tokenizer",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
labbench-tokenize = "labbench.tokenizer:main"
labbench-grades = "labbench.grades:main"
labbench-quicksort = "labbench.quicksort:main"
labbench-bst = "labbench.bst:main"
labbench-trains = "labbench.trains:main"
labbench-hotplate = "labbench.hotplate:main"
labbench-pizza = "labbench.pizza:main"
labbench-editor = "labbench.editor:main"
labbench-wordsearch = "labbench.wordsearch:main"

[tool.hatch.build.targets.wheel]
packages = ["labbench"]

[tool.pytest.ini_options]
addopts = "-ra"
