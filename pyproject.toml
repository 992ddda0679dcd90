[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aioconcur"
version = "0.1.0"
description = "Concurrency helpers for asyncio: join, try_join, race, race_ok and merge."
requires-python = ">=3.10"
dependencies = []
keywords = ["asyncio", "concurrency", "join", "race", "merge", "async-iterator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["aioconcur"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
