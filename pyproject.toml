[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filedialog"
version = "0.1.0"
description = "Toolkit-independent file dialog model: filters, selection, favorites, history and sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["file dialog", "file picker", "filter", "favorites", "gui"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["filedialog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
