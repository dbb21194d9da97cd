[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamebreaker"
version = "0.1.0"
description = "Game-framework helpers: math and string utilities, objects, rooms, input state, INI configuration and audio bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "framework", "ini", "rooms", "objects", "audio", "utilities"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamebreaker"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
