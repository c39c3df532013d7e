[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small classic programming drills: number checks, text puzzles, searching, sorting, matrices, flags, an arena, a counter, queues, a stack, a tree and a student record file."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "sorting",
    "searching",
    "data-structures",
    "binary-search-tree",
    "queue",
    "stack",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
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
drillbox-calc = "drillbox.calculator:main"
drillbox-bst = "drillbox.bst:main"
drillbox-queue = "drillbox.queues:main"
drillbox-students = "drillbox.students:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
