[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "borsbot"
version = "0.1.0"
description = "Parse merge-bot commands from pull request comments and render the bot's replies."
requires-python = ">=3.10"
dependencies = []
keywords = ["bors", "merge queue", "pull request", "commands", "parser", "ci"]
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
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["borsbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
