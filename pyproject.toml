[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sansfight"
version = "0.1.0"
description = "A small bullet-dodging arcade game on a 160x160 four-colour fantasy console"
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "bullet-hell", "fantasy-console", "chiptune"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sansfight = "sansfight.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sansfight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
