[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "everydayread"
version = "0.1.0"
description = "Daily reading helper: shuffled C++ guideline sentences, trending topics and random source files to study"
requires-python = ">=3.10"
dependencies = []
keywords = ["study", "guidelines", "reading", "cpp", "topics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
everydayread = "everydayread.app:main"
everydayread-binsearch = "everydayread.binsearch:main"

[tool.hatch.build.targets.wheel]
packages = ["everydayread"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
