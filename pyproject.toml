[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrmirror"
version = "0.1.0"
description = "Control-message wire format, device messages, game key mapping and frame hand-over for controlling a mirrored Android screen"
requires-python = ">=3.10"
dependencies = []
keywords = ["android", "screen-mirroring", "remote-control", "keymap", "touch", "clipboard"]
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
    "Topic :: Multimedia :: Video :: Display",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scrmirror"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
