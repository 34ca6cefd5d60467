[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pzmap"
version = "0.1.0"
description = "Readers for Project Zomboid map, tile definition and texture pack files, with a 2D rectangle packer for sprite atlases"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "project-zomboid",
    "lotheader",
    "lotpack",
    "texturepack",
    "tiledefinition",
    "rectangle-packing",
    "atlas",
]
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
    "Topic :: Games/Entertainment",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pzmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
