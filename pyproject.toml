[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerolaunch"
version = "0.1.0"
description = "Program launcher settings, versioned config persistence, pinyin conversion and file discovery"
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "configuration", "pinyin", "glob", "desktop"]
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
    "Topic :: Desktop Environment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zerolaunch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
