[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyhttpd"
version = "0.1.0"
description = "A minimal loopback HTTP request listener with a request-head parser and a flag-style argument parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "parser", "tcp", "socket", "arguments"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyhttpd = "tinyhttpd.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyhttpd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
