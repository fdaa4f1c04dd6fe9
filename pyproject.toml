[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tcpchat"
version = "0.1.0"
description = "A small multi-user TCP chat server with nicknames, whispers and a shared history"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "tcp", "netcat", "server", "asyncio"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
tcpchat = "tcpchat.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tcpchat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
