[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqlfaker"
version = "0.1.0"
description = "Generate Databricks SQL CREATE TABLE and INSERT statements with fake data from YAML table schemas"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["sql", "databricks", "fake data", "test data", "yaml", "schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sqlfaker = "sqlfaker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sqlfaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
