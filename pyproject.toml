[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "towerdefense"
version = "0.1.0"
description = "Rules engine for a tower defense level: JSON levels, enemy waves, path movement, towers and player economy."
requires-python = ">=3.10"
dependencies = []
keywords = ["tower defense", "game", "waves", "enemies", "towers", "game logic"]
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
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["towerdefense"]

[tool.hatch.build.targets.sdist]
include = ["towerdefense", "tests", "pyproject.toml"]

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
