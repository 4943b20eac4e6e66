[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tadlab"
version = "0.1.0"
description = "Recursion exercises and bounded list, stack and queue abstract data types with the algorithms built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recursion",
    "abstract data types",
    "list",
    "stack",
    "queue",
    "algorithms",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tadlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
