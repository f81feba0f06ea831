[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blaupause"
version = "0.1.0"
description = "A small copy assistant that copies one directory into another using the platform's native copy tool."
requires-python = ">=3.10"
dependencies = []
keywords = ["backup", "copy", "rsync", "robocopy", "sync", "gui", "tkinter"]
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
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blaupause = "blaupause.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blaupause"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
