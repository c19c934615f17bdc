[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repokit"
version = "0.1.0"
description = "Storage-agnostic building blocks for repositories: entities, fluent filter identifiers, query parameters and domain errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["repository", "unit of work", "query builder", "filter", "pagination", "soft delete"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
