[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geodash"
version = "0.1.0"
description = "A side-scrolling jump-and-dodge arcade game with a menu, coin collecting and a character store"
requires-python = ">=3.10"
keywords = ["game", "arcade", "platformer", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
geodash = "geodash.game:main"

[tool.hatch.build.targets.wheel]
packages = ["geodash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
