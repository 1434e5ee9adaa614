[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rowart"
version = "0.1.0"
description = "Text patterns built row by row: triangles, pyramids, diamonds and tables of stars, numbers and letters."
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "ascii-art", "triangle", "pyramid", "diamond", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rowart = "rowart.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rowart"]

[tool.pytest.ini_options]
addopts = "-ra"
