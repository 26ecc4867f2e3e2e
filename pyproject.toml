[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dequelab"
version = "0.1.0"
description = "A terminal playground for a deque of strings with a cursor: push, pop, step, search and sort"
requires-python = ">=3.10"
dependencies = []
keywords = ["deque", "education", "algorithms", "merge sort", "iterators", "emulator"]
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
test = ["pytest", "hypothesis"]

[project.scripts]
dequelab = "dequelab.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["dequelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
