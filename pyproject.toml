[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webserv"
version = "0.1.0"
description = "Utility library for character classification, number conversion, string search, printf-style formatting, containers and buffered line reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "formatting", "atoi", "deque", "line-reader", "utilities"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["webserv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
