[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filefox"
version = "0.1.0"
description = "A small desktop file explorer with rename, delete and recursive name search"
requires-python = ">=3.10"
keywords = ["file manager", "file explorer", "search", "tkinter"]
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
    "Topic :: Desktop Environment :: File Managers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.gui-scripts]
filefox = "filefox.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["filefox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
