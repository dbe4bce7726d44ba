[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riotkit"
version = "0.1.0"
description = "Typed JSON models and a caching static-data client for the Riot Games League of Legends and Legends of Runeterra APIs"
requires-python = ">=3.10"
dependencies = []
keywords = ["riot", "league-of-legends", "runeterra", "api", "models", "static-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["riotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
