[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bloomstyle"
version = "0.1.0"
description = "Style, unit, responsive breakpoint, pointer and menu primitives for declarative user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "style", "layout", "flexbox", "responsive", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bloomstyle"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
