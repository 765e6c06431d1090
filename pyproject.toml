[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocdays"
version = "0.1.0"
description = "Solutions to twenty-five daily programming puzzles, with a command that prints timed result tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "algorithms", "command-line", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aocdays = "aocdays.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aocdays"]

[tool.hatch.build.targets.sdist]
include = ["aocdays", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
