[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftlex"
version = "0.1.0"
description = "Split lex specification files into their sections and extract their double-quoted strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["lex", "flex", "lexer", "scanner", "specification"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftlex = "ftlex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ftlex"]

[tool.pytest.ini_options]
addopts = "-ra"
