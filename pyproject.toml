[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vallheru"
version = "0.1.0"
description = "Fantasy character name generators and bcrypt password helpers for the Vallheru game."
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = ["fantasy", "names", "generator", "rpg", "nickname", "bcrypt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vallheru"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
