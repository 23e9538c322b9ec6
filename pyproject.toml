[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fumo"
version = "0.1.0"
description = "A small entity-component-system engine and a planet-hopping platformer built on it"
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "game", "platformer", "gravity", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fumo = "fumo.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fumo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
