[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nodekit"
version = "0.1.0"
description = "Linked lists, stacks, queues and classic list and bracket algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked-list", "stack", "queue", "data-structures", "algorithms", "parentheses"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nodekit-vps = "nodekit.brackets:main"
nodekit-stack = "nodekit.stack_commands:main"

[tool.hatch.build.targets.wheel]
packages = ["nodekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
