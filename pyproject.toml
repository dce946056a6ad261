[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshlex"
version = "0.1.0"
description = "Shell-style command line lexing: quote checking, tokenizing, $VAR and $? expansion and quote removal, plus small string and I/O helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "tokenizer", "quoting", "expansion"]
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
    "Topic :: System :: Shells",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mshlex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
