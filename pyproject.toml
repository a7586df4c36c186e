[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "covidtop"
version = "0.1.0"
description = "Rank countries by COVID-19 cases, deaths or recoveries from a country-wise CSV summary"
requires-python = ">=3.10"
dependencies = []
keywords = ["covid-19", "csv", "heap", "ranking", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
covidtop = "covidtop.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["covidtop"]

[tool.pytest.ini_options]
addopts = "-ra"
