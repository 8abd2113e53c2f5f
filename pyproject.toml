[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termctl"
version = "0.1.0"
description = "Terminal control commands as ANSI escape sequences, plus key, mouse, focus, paste and resize event types."
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "escape-codes", "cursor", "keyboard", "mouse", "events"]
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
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termctl-modifiers-demo = "termctl.modifiers_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["termctl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
