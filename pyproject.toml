[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small container, calendar, phone book and RPN calculator classes for teaching data structures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vector",
    "deque",
    "linked-list",
    "date",
    "phonebook",
    "rpn",
    "calculator",
    "lexer",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-phonebook = "labkit.phonebook:main"
labkit-rpn = "labkit.rpn:main"
labkit-dollarcheck = "labkit.dollarcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"
