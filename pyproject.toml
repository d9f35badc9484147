[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calcifer"
version = "0.1.0"
description = "Core of a small code editor: language syntax rules, tabs, search and replace, a shell panel, a file tree, a kanban-style project board and session state"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "code-editor", "syntax", "tabs", "search", "file-tree", "kanban"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calcifer"]

[tool.hatch.build.targets.sdist]
include = ["calcifer", "tests", "README.md"]

[tool.pytest.ini_options]
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
