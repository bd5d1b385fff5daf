[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citygrid"
version = "0.1.0"
description = "City population, housing, school, product and railway station management with density heatmaps"
requires-python = ">=3.10"
dependencies = []
keywords = ["city", "population", "housing", "heatmap", "railway", "census"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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
citygrid-population = "citygrid.population:main"

[tool.hatch.build.targets.wheel]
packages = ["citygrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
