[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsnat"
version = "0.1.0"
description = "Source spans, string interning, diagnostics, a TypeScript lexer, and interpreter values and scopes"
requires-python = ">=3.10"
dependencies = []
keywords = ["typescript", "lexer", "tokenizer", "interner", "source-map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tsnat"]

[tool.pytest.ini_options]
addopts = "-ra"
