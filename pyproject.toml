[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nobridge"
version = "0.1.0"
description = "Contract bridge building blocks: cards, a shuffled deck, players, bids, tricks and PBN game records"
requires-python = ">=3.10"
dependencies = []
keywords = ["bridge", "contract bridge", "cards", "deck", "pbn", "card game"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nobridge = "nobridge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nobridge"]

[tool.pytest.ini_options]
addopts = "-ra"
