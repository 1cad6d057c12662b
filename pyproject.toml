[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxchess"
version = "0.1.0"
description = "A drag-and-drop two-player chess board built on a graph of squares"
requires-python = ">=3.10"
keywords = ["chess", "board game", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oxchess = "oxchess.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oxchess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
