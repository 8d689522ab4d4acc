[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syntaxkit"
version = "0.1.2"
description = "Scanner and recursive-descent parser for a small block-structured language, producing a typed syntax tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "scanner", "ast", "syntax", "compiler", "language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["syntaxkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
