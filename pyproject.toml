[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corrida"
version = "1.0.0"
description = "Two-player terminal quiz race: answer trivia questions correctly to roll the die and reach the finish line first."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "quiz", "trivia", "terminal", "race"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese",
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
corrida = "corrida.main:main"

[tool.hatch.build.targets.wheel]
packages = ["corrida"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
