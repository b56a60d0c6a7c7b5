[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emeals_getter"
version = "0.1.0"
description = "Fetch eMeals recipe pages and build a LaTeX recipe book and a grocery list"
requires-python = ">=3.10"
keywords = ["recipes", "emeals", "latex", "groceries", "scraper"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Text Processing :: Markup :: LaTeX",
]
dependencies = [
    "requests",
    "beautifulsoup4",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
emeals-getter = "emeals_getter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["emeals_getter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
