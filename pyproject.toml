[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triage_desk"
version = "0.1.0"
description = "A small console desk for registering patients and serving them by priority"
requires-python = ">=3.10"
dependencies = []
keywords = ["triage", "queue", "priority", "tickets", "console", "linked list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triage-desk = "triage_desk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["triage_desk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
