[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wowarmory"
version = "0.1.0"
description = "Client for the World of Warcraft community web API: characters, guilds, items, achievements and more."
requires-python = ">=3.10"
keywords = ["world of warcraft", "wow", "battle.net", "api", "armory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
wowarmory-example = "wowarmory.example:main"

[tool.hatch.build.targets.wheel]
packages = ["wowarmory"]

[tool.pytest.ini_options]
addopts = "-ra"
