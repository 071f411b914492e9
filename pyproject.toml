[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mangaview"
version = "0.1.0"
description = "State models for a terminal manga browser: reader pages, reading history, chapter lists, chapter downloads, tag filters and home carousels"
requires-python = ">=3.10"
dependencies = []
keywords = ["manga", "reader", "terminal", "tui", "cbz", "epub", "downloads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Browsers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mangaview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
