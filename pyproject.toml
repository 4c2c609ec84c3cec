[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "justcsv"
version = "0.2.0"
description = "Simple CSV-file reader/writer"
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "rfc4180", "reader", "writer", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
justcsv-read = "justcsv.readcsv:main"
justcsv-log-table = "justcsv.logtable:main"

[tool.hatch.build.targets.wheel]
packages = ["justcsv"]

[tool.hatch.build.targets.sdist]
include = ["justcsv", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
