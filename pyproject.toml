[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serene"
version = "0.1.0"
description = "A quick launcher that searches desktop applications and files in your home directory"
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "search", "desktop", "applications", "files", "xdg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
serene = "serene.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["serene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
