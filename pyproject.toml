[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "antworld"
version = "0.1.0"
description = "A turn-based ant colony simulation on a randomly generated grid world, with a text view and a JSON HTTP endpoint."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ants", "colony", "artificial-life", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
antworld = "antworld.app:main"

[tool.setuptools.packages.find]
include = ["antworld*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
