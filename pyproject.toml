[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Classic data-structure drills: sequence list, linked lists, a contact book and a terminal snake game"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "sequence list", "contacts", "snake", "curses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-contacts = "dsdrills.contact_cli:main"
dsdrills-snake = "dsdrills.snake_ui:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
