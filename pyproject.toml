[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fivednine"
version = "0.1.0"
description = "A game selection carousel for arcade cabinets, drawn with OpenGL"
requires-python = ">=3.10"
keywords = ["game launcher", "carousel", "frontend", "arcade", "opengl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fivednine = "fivednine.main:main"

[tool.hatch.build.targets.wheel]
packages = ["fivednine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
