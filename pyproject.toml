[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilang"
version = "0.1.0"
description = "Lexical and syntactic analyzer for a small C-like teaching language"
requires-python = ">=3.10"
keywords = ["lexer", "parser", "compiler", "recursive-descent", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilang = "minilang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minilang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
