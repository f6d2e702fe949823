[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "manytypes"
version = "0.1.0"
description = "A type database for C and C++ declarations, rendered as headers or as x64dbg type JSON"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "x64dbg",
    "debugger",
    "types",
    "structures",
    "reverse-engineering",
    "c",
    "c++",
    "headers",
]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["manytypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
