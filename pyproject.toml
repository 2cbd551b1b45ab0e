[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ludwig"
version = "0.1.0"
description = "Core pieces of the LUDWIG text editor: character handling, command tables, cursor movement, pattern DFA construction and a help-file indexer"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-editor", "ludwig", "key-bindings", "dfa", "help-index"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ludwighlpbld = "ludwig.helpbuild:main"

[tool.hatch.build.targets.wheel]
packages = ["ludwig"]

[tool.hatch.build.targets.sdist]
include = ["ludwig", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
