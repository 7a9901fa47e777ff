[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robocontrol"
version = "0.1.0"
description = "Encode Robosapien toy robot commands into timed line levels and send them from a small web page"
requires-python = ">=3.10"
dependencies = []
keywords = ["robosapien", "robot", "infrared", "remote control", "web"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robocontrol = "robocontrol.app:main"

[tool.hatch.build.targets.wheel]
packages = ["robocontrol"]

[tool.pytest.ini_options]
addopts = "-ra"
