[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "takc"
version = "0.1.0"
description = "Support library for a Tak compiler front end: tokens, type data, syntax tree nodes, configuration and command-line flags"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "tak", "ast", "tokens", "type-system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["takc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
