[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokata"
version = "0.1.0"
description = "Classic algorithm exercises: dynamic programming, backtracking, arrays, strings, linked lists and trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "backtracking",
    "data-structures",
    "exercises",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokata-reverse = "algokata.codechef:reverse_main"
algokata-lucky-four = "algokata.codechef:lucky_four_main"

[tool.hatch.build.targets.wheel]
packages = ["algokata"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
