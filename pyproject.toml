[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wbsplan"
version = "1.0.0"
description = "Work Breakdown Structure projects: hierarchical tasks, effort tracking and XML project files"
requires-python = ">=3.10"
dependencies = []
keywords = ["wbs", "work breakdown structure", "project management", "tasks", "scheduling", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wbsplan = "wbsplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wbsplan"]

[tool.pytest.ini_options]
addopts = "-ra"
