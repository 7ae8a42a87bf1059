[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objdemos"
version = "0.1.0"
description = "Small object-oriented demonstrations: design patterns, reference counting, exceptions, helpers and a terminal snake game"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "design-patterns",
    "bridge",
    "singleton",
    "reference-counting",
    "smart-pointer",
    "snake",
    "bitmask",
    "linked-list",
    "atomic",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
objdemos-bridge = "objdemos.bridge:main"
objdemos-cube = "objdemos.cube:main"
objdemos-throwing = "objdemos.throwing:main"
objdemos-geometry = "objdemos.geometry:main"
objdemos-printer = "objdemos.printer:main"
objdemos-owning = "objdemos.owning:main"
objdemos-person = "objdemos.person_demo:main"
objdemos-snake = "objdemos.snake.game:main"

[tool.hatch.build.targets.wheel]
packages = ["objdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
