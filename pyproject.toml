[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillbox"
version = "0.1.0"
description = "Small programming drills: puzzle solutions, state machines, bounded containers, an LRU cache, a bump allocator and a predator-prey pool simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "algorithms",
    "state-machine",
    "lru-cache",
    "allocator",
    "simulation",
    "puzzles",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
drillbox-camelcase = "drillbox.camelcase:main"
drillbox-fsm = "drillbox.fsm:main"
drillbox-lru = "drillbox.lru_cache:main"
drillbox-pool = "drillbox.pool:main"

[tool.hatch.build.targets.wheel]
packages = ["drillbox"]

[tool.hatch.build.targets.sdist]
include = ["drillbox", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
